"""Builtin words. Each one is a function of the Evaluator that leaves its result on the stack or raises EvalError.

Stack depth and operand types are checked before anything is popped, so a failing builtin leaves the stack as it was.
"""

import sys

from quotecat.lang.error import TypeMismatch
from quotecat.lang.objects import Quotation


BUILTINS = {}


def builtin(name):
    """Registers the decorated function as the native behavior of name."""

    def register(fn):
        BUILTINS[name] = fn
        return fn

    return register


def install(dictionary):
    """Defines every builtin word in dictionary."""
    for name, fn in BUILTINS.items():
        dictionary.define(name, fn)


def expect_quotation(evaluator, name, depth=0):
    """Raises TypeMismatch unless the value depth positions below the top is a Quotation."""
    if not isinstance(evaluator.peek(depth), Quotation):
        raise TypeMismatch("{}: quotation expected", name)


@builtin("zap")
def zap(evaluator):
    evaluator.pop()


@builtin("empty")
def empty(evaluator):
    evaluator.clear()


@builtin("i")
def i(evaluator):
    """Evaluates the quotation on top of the stack."""
    expect_quotation(evaluator, "i")
    evaluator.evaluate(evaluator.pop())


@builtin("unit")
def unit(evaluator):
    """x -> [x]"""
    evaluator.push(Quotation([evaluator.pop()]))


@builtin("dup")
def dup(evaluator):
    """Quotations are copied one level deep; symbols are pushed again as is."""
    top = evaluator.peek()
    evaluator.push(top.copy() if isinstance(top, Quotation) else top)


@builtin("swap")
def swap(evaluator):
    evaluator.require(2)
    stack = evaluator.stack
    stack[-1], stack[-2] = stack[-2], stack[-1]


@builtin("cat")
def cat(evaluator):
    """[b...] [a...] -> [b... a...]"""
    evaluator.require(2)
    expect_quotation(evaluator, "cat")
    expect_quotation(evaluator, "cat", 1)

    a = evaluator.pop()
    b = evaluator.pop()
    evaluator.push(Quotation(b.items + a.items, b.line))


@builtin("cons")
def cons(evaluator):
    """b [a...] -> [b a...]"""
    evaluator.require(2)
    expect_quotation(evaluator, "cons")

    a = evaluator.pop()
    b = evaluator.pop()
    evaluator.push(Quotation([b] + a.items, a.line))


@builtin("dip")
def dip(evaluator):
    """b [a...] -> a... b"""
    evaluator.require(2)
    expect_quotation(evaluator, "dip")

    a = evaluator.pop()
    b = evaluator.pop()
    evaluator.evaluate(a)
    evaluator.push(b)


@builtin("show")
def show(evaluator):
    evaluator.display()


@builtin("exit")
def exit_(evaluator):
    sys.exit(0)
