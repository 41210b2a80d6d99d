import unittest

from quotecat.lang.dictionary import Dictionary, Word
from quotecat.lang.objects import Quotation, Symbol


class SymbolTestCase(unittest.TestCase):

    def test_render(self):
        self.assertEqual("FOO ", Symbol("FOO", frozen=True).render())
        self.assertEqual("dup", str(Symbol("dup")))

    def test_eq(self):
        self.assertEqual(Symbol("A", True, line=1), Symbol("A", True, line=9))
        self.assertNotEqual(Symbol("a", True), Symbol("a", False))
        self.assertNotEqual(Symbol("A"), Quotation([Symbol("A")]))


class QuotationTestCase(unittest.TestCase):

    def test_render(self):
        cases = {
            "[ ] ": Quotation(),
            "[ FOO BAR ] ": Quotation([Symbol("FOO", True), Symbol("BAR", True)]),
            "[ A [ dup [ ] ] ] ": Quotation([Symbol("A", True), Quotation([Symbol("dup"), Quotation()])]),
        }
        for expected, case in cases.items():
            self.assertEqual(expected, case.render())

    def test_owns_items(self):
        items = [Symbol("A", True)]
        quote = Quotation(items)
        items.append(Symbol("B", True))
        self.assertEqual(1, len(quote))

    def test_copy_is_shallow(self):
        inner = Quotation([Symbol("A", True)])
        quote = Quotation([inner, Symbol("B", True)], line=3)
        copy = quote.copy()

        self.assertEqual(quote, copy)
        self.assertIsNot(quote.items, copy.items)
        self.assertIs(inner, copy[0])
        self.assertIs(quote[1], copy[1])
        self.assertEqual(3, copy.line)


class DictionaryTestCase(unittest.TestCase):

    def test_define_and_lookup(self):
        dictionary = Dictionary()
        self.assertIsNone(dictionary.lookup("foo"))

        body = Quotation([Symbol("dup")])
        word = dictionary.define("foo", body)
        self.assertIs(word, dictionary.lookup("foo"))
        self.assertTrue(word.defined)
        self.assertIs(body, word.body)

    def test_redefine_replaces(self):
        dictionary = Dictionary()
        dictionary.define("foo", Quotation([Symbol("A", True)]))
        dictionary.define("foo", lambda evaluator: None)

        self.assertFalse(dictionary.lookup("foo").defined)
        self.assertIsNone(dictionary.lookup("bar"))

    def test_word_behavior(self):
        self.assertRaises(TypeError, Word, "foo", Symbol("A", True))
        self.assertIsNone(Word("foo", print).body)


if __name__ == '__main__':
    unittest.main()
