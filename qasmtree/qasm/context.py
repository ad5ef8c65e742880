# This code is part of qasmtree.
#
# (C) Copyright IBM 2017.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Collaborators and limits for one parse."""

from qasmtree.user_config import get_config

from .builder import AstArena
from .include import FileIncludeResolver
from .interner import StringInterner

DEFAULT_MAX_STACK_DEPTH = 10000
DEFAULT_MAX_INCLUDE_DEPTH = 32


class ParseContext:
    """Everything :class:`.QasmParser` needs besides the source text.

    Args:
        builder (AstBuilder): creates the nodes. Defaults to an
            :class:`.AstArena` over ``interner``.
        interner (StringInterner): issues handles for identifiers, file
            names and external function names. When omitted, the
            ``interner`` of ``builder`` is shared if it has one, since the
            lexer and the builder must agree on every string handle.
        resolve_include (callable): ``resolve_include(path) -> str``, returns
            the text of an included file, or None if it is not available.
            Defaults to a :class:`.FileIncludeResolver`.
        on_success (callable): called once with the root handle.
        on_failure (callable): called once with ``(line, message)``.
        max_stack_depth (int): limit on the parser state stack.
        max_include_depth (int): limit on nested includes.
        debug (bool): trace the parser through the ``qasmtree`` logger.
    """

    def __init__(
        self,
        builder=None,
        interner=None,
        resolve_include=None,
        on_success=None,
        on_failure=None,
        max_stack_depth=DEFAULT_MAX_STACK_DEPTH,
        max_include_depth=DEFAULT_MAX_INCLUDE_DEPTH,
        debug=False,
    ):
        if interner is None:
            interner = getattr(builder, "interner", None)
        if interner is None:
            interner = StringInterner()
        self.interner = interner
        self.builder = builder if builder is not None else AstArena(self.interner)
        self.resolve_include = (
            resolve_include if resolve_include is not None else FileIncludeResolver()
        )
        self.on_success = on_success
        self.on_failure = on_failure
        self.max_stack_depth = max_stack_depth
        self.max_include_depth = max_include_depth
        self.debug = debug

    @classmethod
    def from_config(cls, settings=None, **kwargs):
        """Create a context from the user settings.

        Args:
            settings (dict): parsed settings as returned by
                :func:`~qasmtree.user_config.get_config`, which is read when
                omitted.
            kwargs: passed to the constructor, taking priority over
                ``settings``.

        Returns:
            ParseContext: the new context.
        """
        if settings is None:
            settings = get_config()
        options = {
            "max_stack_depth": settings.get("max_stack_depth", DEFAULT_MAX_STACK_DEPTH),
            "max_include_depth": settings.get("max_include_depth", DEFAULT_MAX_INCLUDE_DEPTH),
            "debug": settings.get("parse_debug", False),
        }
        if "resolve_include" not in kwargs:
            options["resolve_include"] = FileIncludeResolver(settings.get("include_path", []))
        options.update(kwargs)
        return cls(**options)
