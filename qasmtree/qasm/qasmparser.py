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

"""OpenQASM parser."""

import logging

import ply.yacc as yacc

from .context import ParseContext
from .exceptions import QasmError, QasmLexicalError, QasmResourceError, QasmSyntaxError
from .outcome import Failure, Success
from .qasmlexer import QasmLexer

logger = logging.getLogger(__name__)

TOKEN_NAMES = {"$end": "end of input"}


class QasmParser:
    """OPENQASM Parser.

    Every grammar reduction makes exactly one call to the context's builder,
    or passes a handle through unchanged. The values on the parser stack are
    only ever the integer handles the builder returned.
    """

    # pylint: disable=missing-docstring,invalid-name

    def __init__(self, context=None):
        """Create the parser.

        Args:
            context (ParseContext): collaborators and limits. A default
                context, building an :class:`.AstArena`, is used if omitted.
        """
        self.context = context if context is not None else ParseContext()
        self.builder = self.context.builder
        self.lexer = QasmLexer(
            self.context.interner,
            self.context.resolve_include,
            self.context.max_include_depth,
        )
        self.tokens = self.lexer.tokens
        self.parser = yacc.yacc(
            module=self, debug=False, write_tables=False, errorlog=yacc.NullLogger()
        )
        logger.debug("Built LALR tables with %d states", len(self.parser.action))

    # ---- Begin the PLY parser ----
    start = "main"

    # ----------------------------------------
    #  main : magic ';' include included_program
    #       | magic ';' program
    #       | include included_program
    #       | program
    # ----------------------------------------
    def p_main_0(self, program):
        """
        main : magic ';' include included_program
        """
        program[0] = self.builder.create_main_program(program[1], program[3], program[4])

    def p_main_1(self, program):
        """
        main : magic ';' program
        """
        program[0] = self.builder.create_main_program(program[1], None, program[3])

    def p_main_2(self, program):
        """
        main : include included_program
        """
        program[0] = self.builder.create_main_program(None, program[1], program[2])

    def p_main_3(self, program):
        """
        main : program
        """
        program[0] = self.builder.create_main_program(None, None, program[1])

    def p_magic(self, program):
        """
        magic : OPENQASM real
        """
        program[0] = self.builder.create_magic(program[2])

    def p_include(self, program):
        """
        include : INCLUDE STRING ';'
        """
        program[0] = self.builder.create_include(program[2])

    # ----------------------------------------
    #  program : statement
    #          | program statement
    #          | program include
    #
    # After the leading include the statement list may itself start with
    # an include, so it gets its own nonterminal to keep the first include
    # unambiguous.
    # ----------------------------------------
    def p_program_0(self, program):
        """
        program : statement
        included_program : statement
                         | include
        """
        program[0] = self.builder.create_program(None, program[1])

    def p_program_1(self, program):
        """
        program : program statement
                | program include
        included_program : included_program statement
                         | included_program include
        """
        program[0] = self.builder.create_program(program[1], program[2])

    def p_statement(self, program):
        """
        statement : decl
                  | quantum_op ';'
        """
        program[0] = program[1]

    # ----------------------------------------
    #  id : ID
    # ----------------------------------------
    def p_id(self, program):
        """
        id : ID
        """
        program[0] = self.builder.create_id(program[1], program.lineno(1))

    def p_indexed_id(self, program):
        """
        indexed_id : id '[' nninteger ']'
        """
        program[0] = self.builder.create_indexed_id(program[1], program[3])

    def p_primary(self, program):
        """
        primary : id
                | indexed_id
        """
        program[0] = program[1]

    # ----------------------------------------
    #  id_list : id
    #          | id_list ',' id
    #
    # gate_id_list and bit_list have the same shape, for the gate
    # parameters and the gate qubit arguments.
    # ----------------------------------------
    def p_id_list_0(self, program):
        """
        id_list : id
        gate_id_list : id
        bit_list : id
        """
        program[0] = self.builder.create_id_list(None, program[1])

    def p_id_list_1(self, program):
        """
        id_list : id_list ',' id
        gate_id_list : gate_id_list ',' id
        bit_list : bit_list ',' id
        """
        program[0] = self.builder.create_id_list(program[1], program[3])

    def p_primary_list_0(self, program):
        """
        primary_list : primary
        """
        program[0] = self.builder.create_primary_list(None, program[1])

    def p_primary_list_1(self, program):
        """
        primary_list : primary_list ',' primary
        """
        program[0] = self.builder.create_primary_list(program[1], program[3])

    # ----------------------------------------
    # decl : qreg_decl ';'
    #      | creg_decl ';'
    #      | gate_decl
    # ----------------------------------------
    def p_decl(self, program):
        """
        decl : qreg_decl ';'
             | creg_decl ';'
             | gate_decl
        """
        program[0] = program[1]

    def p_qreg_decl(self, program):
        """
        qreg_decl : QREG indexed_id
        """
        program[0] = self.builder.create_qreg(program[2])

    def p_creg_decl(self, program):
        """
        creg_decl : CREG indexed_id
        """
        program[0] = self.builder.create_creg(program[2])

    # ----------------------------------------
    # gate_decl : GATE id bit_list gate_body
    #           | GATE id '(' ')' bit_list gate_body
    #           | GATE id '(' gate_id_list ')' bit_list gate_body
    # ----------------------------------------
    def p_gate_decl_0(self, program):
        """
        gate_decl : GATE id bit_list gate_body
        """
        program[0] = self.builder.create_gate(program[2], None, program[3], program[4])

    def p_gate_decl_1(self, program):
        """
        gate_decl : GATE id '(' ')' bit_list gate_body
        """
        program[0] = self.builder.create_gate(program[2], None, program[5], program[6])

    def p_gate_decl_2(self, program):
        """
        gate_decl : GATE id '(' gate_id_list ')' bit_list gate_body
        """
        program[0] = self.builder.create_gate(program[2], program[4], program[6], program[7])

    def p_gate_body_0(self, program):
        """
        gate_body : '{' gate_op_list '}'
        """
        program[0] = self.builder.create_gate_body(program[2])

    def p_gate_body_1(self, program):
        """
        gate_body : '{' '}'
        """
        program[0] = self.builder.create_gate_body(None)

    def p_gate_op_list_0(self, program):
        """
        gate_op_list : gate_op
        """
        program[0] = self.builder.create_gate_op_list(None, program[1])

    def p_gate_op_list_1(self, program):
        """
        gate_op_list : gate_op_list gate_op
        """
        program[0] = self.builder.create_gate_op_list(program[1], program[2])

    # ----------------------------------------
    # These are the operations allowed outside of a gate body, on
    # registers and register elements.
    # ----------------------------------------
    def p_unitary_op_0(self, program):
        """
        unitary_op : U '(' exp_list ')' primary
        """
        program[0] = self.builder.create_universal_unitary(program[3], program[5])

    def p_unitary_op_1(self, program):
        """
        unitary_op : CX primary ',' primary
        """
        program[0] = self.builder.create_cx(program[2], program[4])

    def p_unitary_op_2(self, program):
        """
        unitary_op : id primary_list
        """
        program[0] = self.builder.create_custom_unitary(program[1], None, program[2])

    def p_unitary_op_3(self, program):
        """
        unitary_op : id '(' ')' primary_list
        """
        program[0] = self.builder.create_custom_unitary(program[1], None, program[4])

    def p_unitary_op_4(self, program):
        """
        unitary_op : id '(' exp_list ')' primary_list
        """
        program[0] = self.builder.create_custom_unitary(program[1], program[3], program[5])

    # ----------------------------------------
    # These are the operations allowed inside a gate body, on the gate's
    # qubit arguments only.
    # ----------------------------------------
    def p_gate_op_0(self, program):
        """
        gate_op : U '(' exp_list ')' id ';'
        """
        program[0] = self.builder.create_universal_unitary(program[3], program[5])

    def p_gate_op_1(self, program):
        """
        gate_op : CX id ',' id ';'
        """
        program[0] = self.builder.create_cx(program[2], program[4])

    def p_gate_op_2(self, program):
        """
        gate_op : id id_list ';'
        """
        program[0] = self.builder.create_custom_unitary(program[1], None, program[2])

    def p_gate_op_3(self, program):
        """
        gate_op : id '(' ')' id_list ';'
        """
        program[0] = self.builder.create_custom_unitary(program[1], None, program[4])

    def p_gate_op_4(self, program):
        """
        gate_op : id '(' exp_list ')' id_list ';'
        """
        program[0] = self.builder.create_custom_unitary(program[1], program[3], program[5])

    def p_gate_op_5(self, program):
        """
        gate_op : BARRIER id_list ';'
        """
        program[0] = self.builder.create_barrier(program[2])

    # ----------------------------------------
    # opaque : OPAQUE id bit_list
    #        | OPAQUE id '(' ')' bit_list
    #        | OPAQUE id '(' gate_id_list ')' bit_list
    # ----------------------------------------
    def p_opaque_0(self, program):
        """
        opaque : OPAQUE id bit_list
        """
        program[0] = self.builder.create_opaque(program[2], None, program[3])

    def p_opaque_1(self, program):
        """
        opaque : OPAQUE id '(' ')' bit_list
        """
        program[0] = self.builder.create_opaque(program[2], None, program[5])

    def p_opaque_2(self, program):
        """
        opaque : OPAQUE id '(' gate_id_list ')' bit_list
        """
        program[0] = self.builder.create_opaque(program[2], program[4], program[6])

    def p_measure(self, program):
        """
        measure : MEASURE primary ASSIGN primary
                | MEASURE primary ',' primary
        """
        program[0] = self.builder.create_measure(program[2], program[4])

    def p_barrier(self, program):
        """
        barrier : BARRIER primary_list
        """
        program[0] = self.builder.create_barrier(program[2])

    def p_reset(self, program):
        """
        reset : RESET primary
        """
        program[0] = self.builder.create_reset(program[2])

    def p_if(self, program):
        """
        if : IF '(' id MATCHES nninteger ')' quantum_op
        """
        program[0] = self.builder.create_if(program[3], program[5], program[7])

    def p_quantum_op(self, program):
        """
        quantum_op : unitary_op
                   | opaque
                   | measure
                   | barrier
                   | reset
                   | if
        """
        program[0] = program[1]

    # ----------------------------------------
    # Literals
    # ----------------------------------------
    def p_nninteger(self, program):
        """
        nninteger : NNINTEGER
        """
        program[0] = self.builder.create_int(program[1])

    def p_real(self, program):
        """
        real : REAL
        """
        program[0] = self.builder.create_real(program[1])

    def p_pi(self, program):
        """
        pi : PI
        """
        program[0] = self.builder.create_pi()

    # ----------------------------------------
    # unary : nninteger
    #       | real
    #       | pi
    #       | id
    #       | '(' expression ')'
    #       | id '(' external ')'
    #       | external '(' expression ')'
    # ----------------------------------------
    def p_unary_0(self, program):
        """
        unary : nninteger
              | real
              | pi
              | id
        """
        program[0] = program[1]

    def p_unary_1(self, program):
        """
        unary : '(' expression ')'
        """
        program[0] = program[2]

    def p_unary_2(self, program):
        """
        unary : id '(' external ')'
        """
        program[0] = self.builder.create_external(program[1], program[3])

    def p_unary_3(self, program):
        """
        unary : external '(' expression ')'
        """
        program[0] = self.builder.create_external(program[3], program[1])

    def p_external(self, program):
        """
        external : SIN
                 | COS
                 | TAN
                 | EXP
                 | LN
                 | SQRT
        """
        program[0] = program[1]

    # ----------------------------------------
    # The operator levels, tightest first: signs, then + and -, then
    # * and /, then ^. All binary operators are left associative.
    # ----------------------------------------
    def p_prefix_expression_0(self, program):
        """
        prefix_expression : unary
        """
        program[0] = program[1]

    def p_prefix_expression_1(self, program):
        """
        prefix_expression : '+' prefix_expression
                          | '-' prefix_expression
        """
        program[0] = self.builder.create_prefix_op(program[1], program[2])

    def p_additive_expression(self, program):
        """
        additive_expression : prefix_expression
                            | additive_expression '+' prefix_expression
                            | additive_expression '-' prefix_expression
        """
        self._binary(program)

    def p_multiplicative_expression(self, program):
        """
        multiplicative_expression : additive_expression
                                  | multiplicative_expression '*' additive_expression
                                  | multiplicative_expression '/' additive_expression
        """
        self._binary(program)

    def p_expression(self, program):
        """
        expression : multiplicative_expression
                   | expression '^' multiplicative_expression
        """
        self._binary(program)

    def _binary(self, program):
        if len(program) == 2:
            program[0] = program[1]
        else:
            program[0] = self.builder.create_binary_op(program[2], program[1], program[3])

    # ----------------------------------------
    # exp_list : expression
    #          | exp_list ',' expression
    # ----------------------------------------
    def p_exp_list_0(self, program):
        """
        exp_list : expression
        """
        program[0] = self.builder.create_expression_list(None, program[1])

    def p_exp_list_1(self, program):
        """
        exp_list : exp_list ',' expression
        """
        program[0] = self.builder.create_expression_list(program[1], program[3])

    def p_error(self, program):
        state = self.parser.statestack[-1]
        expected = self._expected_tokens(state)
        source = None
        if program is None:
            line = self.lexer.current_line()
            found = "end of input"
        else:
            line = program.lineno
            found = "%s '%s'" % (program.type, self.token_text(program))
            source = getattr(program, "include_file", None)
        message = "Unexpected %s" % found
        if expected:
            message += ", expected one of: " + ", ".join(expected)
        if source is not None:
            message = "%s: %s" % (source, message)
        raise QasmSyntaxError(message, line=line)

    # ---- End of the PLY parser ----

    def _expected_tokens(self, state):
        """Return the sorted names of the tokens the parser could shift next.

        The action row of an LALR state may hold lookaheads merged in from
        other contexts. Each candidate is run through the reductions it
        triggers on a copy of the state stack, and kept only if it is
        finally shifted (or accepted).
        """
        expected = []
        for name in self.parser.action[state]:
            if self._is_shifted(name):
                expected.append(TOKEN_NAMES.get(name, name))
        return sorted(expected)

    def _is_shifted(self, name):
        stack = list(self.parser.statestack)
        while True:
            action = self.parser.action[stack[-1]].get(name)
            if action is None:
                return False
            if action >= 0:
                return True
            production = self.parser.productions[-action]
            if production.len:
                del stack[-production.len :]
            stack.append(self.parser.goto[stack[-1]][production.name])

    def token_text(self, token):
        """Return the source text of a token."""
        if token.type == "STRING":
            return '"%s"' % self.context.interner.lookup(token.value)
        if token.type == "ID" or token.type in self.lexer.externals:
            return self.context.interner.lookup(token.value)
        return str(token.value)

    def _next_token(self):
        statestack = getattr(self.parser, "statestack", ())
        if len(statestack) > self.context.max_stack_depth:
            raise QasmResourceError(
                self.lexer.locate("Parser stack exceeds %d entries" % self.context.max_stack_depth),
                line=self.lexer.current_line(),
            )
        return self.lexer.token()

    def read_tokens(self, data, filename=None):
        """Yield the tokens of data, with included files spliced in."""
        self.lexer.input(self._decode(data), filename)
        yield from self.lexer

    @staticmethod
    def _decode(data):
        if not isinstance(data, bytes):
            return data
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as ex:
            raise QasmLexicalError(
                "Source is not valid UTF-8:",
                ex.reason,
                line=data.count(b"\n", 0, ex.start) + 1,
            ) from ex

    def parse(self, data, filename=None):
        """Parse data, reporting the outcome through the context.

        Exactly one of the context's ``on_success`` and ``on_failure``
        callbacks is called, if set.

        Args:
            data (str or bytes): OPENQASM source text, UTF-8 if bytes.
            filename (str): name of the source, for log messages.

        Returns:
            Success or Failure: the outcome of the parse.
        """
        try:
            self.lexer.input(self._decode(data), filename)
            root = self.parser.parse(
                lexer=self.lexer,
                tokenfunc=self._next_token,
                debug=logger if self.context.debug else False,
            )
        except QasmError as ex:
            line = ex.line if ex.line is not None else self.lexer.current_line()
            outcome = Failure(line, ex.message, ex.kind)
        except (MemoryError, RecursionError) as ex:
            outcome = Failure(
                self.lexer.current_line(),
                "Parser ran out of resources: %s" % type(ex).__name__,
                QasmResourceError.kind,
            )
        else:
            outcome = Success(root)

        if outcome.ok:
            logger.debug("Parsed %s, root handle %d", filename or "<data>", outcome.root)
            if self.context.on_success is not None:
                self.context.on_success(outcome.root)
        else:
            logger.info(
                "Failed to parse %s at line %s: %s",
                filename or "<data>",
                outcome.line,
                outcome.message,
            )
            if self.context.on_failure is not None:
                self.context.on_failure(outcome.line, outcome.message)
        return outcome
