# This library is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation; either version 3 of the
# License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, see
# <http://www.gnu.org/licenses/>.


"""
plume.functional

Composition, pipelines, and partial application. Results flow from
one stage to the next as whole argument lists: a stage returning a
`values` spreads into the next stage's positional (and keyword)
arguments, while any other result is passed along as the single
argument.

license: LGPL v.3
"""


from functools import partial

from .values import values, is_values, feed


__all__ = (
    "identity", "constantly",
    "rcompose", "compose", "composed",
    "pipe", "pipe_multi",
    "curry", "rcurry",
)


def _name(fun):
    return getattr(fun, "__name__", None) or repr(fun)


def identity(*args, **kwds):
    """
    (identity VALUE)
    (identity VALUES...)

    Passes its arguments through unchanged. A lone positional argument
    is returned as-is, anything else comes back as a `values`
    """

    if len(args) == 1 and not kwds:
        return args[0]
    else:
        return values(*args, **kwds)


class constantly(object):
    """
    (constantly VALUE)

    A callable which ignores its arguments and always returns VALUE
    """

    __slots__ = ("value", )


    def __init__(self, value):
        self.value = value


    def __call__(self, *args, **kwds):
        return self.value


    def __repr__(self):
        return "<constantly %r>" % (self.value, )


class composed(object):
    """
    The composition of two or more stages, invoked left to right.
    Build these with `rcompose` or `compose`.
    """

    __slots__ = ("stages", )


    def __init__(self, stages):
        flat = []
        for stage in stages:
            if isinstance(stage, composed):
                flat.extend(stage.stages)
            else:
                flat.append(stage)
        self.stages = tuple(flat)


    def __call__(self, *args, **kwds):
        first, *rest = self.stages

        result = first(*args, **kwds)
        for stage in rest:
            result = feed(stage, result)
        return result


    def __repr__(self):
        return "<rcompose %s at 0x%x>" % \
            (" | ".join(map(_name, self.stages)), id(self))


def rcompose(*funs):
    """
    (rcompose F1 F2 ... FN)

    Left-to-right composition. The result of F1 becomes the argument
    list of F2, and so on, with FN producing the final result. With no
    stages, this is `identity`. With one, it is that stage itself.
    """

    if not funs:
        return identity
    elif len(funs) == 1:
        return funs[0]
    else:
        return composed(funs)


def compose(*funs):
    """
    (compose F1 F2 ... FN)

    Right-to-left composition, `(compose f g)` calls `g` first and
    hands its results to `f`
    """

    return rcompose(*reversed(funs))


def pipe(value, *funs):
    """
    (pipe VALUE F1 F2 ... FN)

    Feeds VALUE as the single argument through the left-to-right
    composition of F1 through FN
    """

    if not funs:
        return value
    return rcompose(*funs)(value)


def pipe_multi(vals, *funs):
    """
    (pipe-multi VALUES F1 F2 ... FN)

    Like `pipe`, but VALUES (a `values` or any iterable) is spread as
    the initial argument list. With no stages the VALUES pass through
    `identity`: a single value comes back as itself, any other count
    as a `values`.
    """

    if not is_values(vals):
        vals = values(*vals)

    return vals(rcompose(*funs))


class curry(partial):
    """
    (curry FUN ARGS...)

    Captures ARGS as the leading arguments of FUN. Further arguments
    given at call time follow the captured ones.
    """

    def __repr__(self):
        return "<curry %s %r>" % (_name(self.func), self.args)


class rcurry(object):
    """
    (rcurry FUN ARGS...)

    Captures ARGS as the trailing arguments of FUN. Further arguments
    given at call time come before the captured ones.
    """

    __slots__ = ("func", "args", "keywords", )


    def __init__(self, func, *args, **keywords):
        if not callable(func):
            raise TypeError("the first argument must be callable")

        self.func = func
        self.args = args
        self.keywords = keywords


    def __call__(self, *args, **kwds):
        if self.keywords:
            kwds = dict(self.keywords, **kwds)
        return self.func(*args, *self.args, **kwds)


    def __repr__(self):
        return "<rcurry %s %r>" % (_name(self.func), self.args)


#
# The end.
