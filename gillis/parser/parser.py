"""
Gillis Recursive-Descent Parser

Implements an LL(1) parser for Gillis. Each non-terminal has one method
that picks a production from the current look-ahead, reports the rule to
the trace collector, matches the terminals of the right-hand side and
recurses into its non-terminals. The call stack plays the part of the
pushdown automaton's stack, except for instruction lists and operator
chains, which are read in loops.

Author: xwest
"""

from typing import Dict, Optional, TextIO, Union

from ..lexer.lexer import Lexer
from ..lexer.tokens import Symbol, LexicalUnit, SourceLocation
from ..lexer.errors import LexerError
from .grammar import (
    NonTerminal, RULES, CODE_RULES, THEN_CODE_RULES, INSTRUCTION_RULES,
    EXPR_ARITH_RULES, BINARY_EXPR_RULE, OP_RULES, COMP_RULES
)
from .parse_tree import Leaf, Empty, Node
from .trace import RuleTrace, RecordingTrace, NullTrace
from .errors import (
    ParseError, create_unexpected_token_error, create_no_production_error,
    create_trailing_input_error
)


class Parser:
    """
    Gillis LL(1) parser.

    Holds exactly one look-ahead symbol, pulled from the lexer on demand.
    One Parser instance parses one program.
    """

    def __init__(self, source: Union[str, TextIO, Lexer],
                 trace: Optional[RuleTrace] = None, filename: str = "<unknown>"):
        """
        Create a parser and read the first look-ahead symbol.

        Args:
            source: Source code string, readable text stream or Lexer
            trace: Collector receiving the applied rules (discarded if None)
            filename: Name of source file for error reporting

        Raises:
            LexerError: If the first token cannot be read
        """
        self.scanner = source if isinstance(source, Lexer) else Lexer(source, filename)
        self.trace: RuleTrace = trace if trace is not None else NullTrace()
        try:
            self.current: Symbol = self.scanner.next_token()
        except LexerError:
            self.scanner.close()
            raise

    def parse(self) -> Node:
        """
        Parse the whole program.

        The character source is closed whether parsing succeeds or fails.

        Returns:
            The parse tree rooted at <Program>

        Raises:
            LexerError: On the first lexical error
            ParseError: On the first syntax error
        """
        try:
            tree = self._program()
            if self.current.kind != LexicalUnit.EOS:
                raise create_trailing_input_error(self.current, self._location())
        finally:
            self.scanner.close()

        self.trace.close()
        return tree

    # ------------------------------------------------------------------
    # Matching of terminals
    # ------------------------------------------------------------------

    def _consume(self):
        """Advance in the input, reading the next look-ahead."""
        self.current = self.scanner.next_token()

    def _match(self, kind: LexicalUnit) -> Leaf:
        """Match a terminal against the look-ahead and consume it."""
        if self.current.kind != kind:
            raise create_unexpected_token_error(kind, self.current, self._location())

        symbol = self.current
        self._consume()
        return Leaf(symbol)

    def _select(self, nonterminal: NonTerminal, table: Dict[LexicalUnit, int]) -> int:
        """Pick the rule for a non-terminal from the look-ahead and report it."""
        number = table.get(self.current.kind)
        if number is None:
            raise create_no_production_error(
                nonterminal, frozenset(table), self.current, self._location()
            )

        self._apply(number)
        return number

    def _apply(self, number: int):
        self.trace.rule(RULES[number])

    def _location(self) -> SourceLocation:
        return SourceLocation(self.scanner.filename, self.current.line, self.current.column)

    # ------------------------------------------------------------------
    # Grammar rules
    # ------------------------------------------------------------------

    def _program(self) -> Node:
        # [1] <Program> -> LET [ProgName] BE <Code> END
        self._apply(1)
        return Node(NonTerminal.Program, [
            self._match(LexicalUnit.LET),
            self._match(LexicalUnit.PROGNAME),
            self._match(LexicalUnit.BE),
            self._code(),
            self._match(LexicalUnit.END),
        ])

    def _code(self, table: Dict[LexicalUnit, int] = CODE_RULES) -> Node:
        """
        Parse a list of instructions.

        [2] <Code> -> <Instruction> : <Code>
        [3] <Code> -> ε

        The right recursion of rule 2 is run as a loop, so long programs do
        not grow the call stack; the nested Code nodes are assembled
        afterwards, innermost first. The table decides which keyword ends
        the list.
        """
        steps = []
        while self._select(NonTerminal.Code, table) == 2:
            steps.append((self._instruction(), self._match(LexicalUnit.COLON)))

        tree = Node(NonTerminal.Code, [Empty()])
        for instruction, colon in reversed(steps):
            tree = Node(NonTerminal.Code, [instruction, colon, tree])
        return tree

    def _instruction(self) -> Node:
        # [4-8] <Instruction> -> <Assign> | <If> | <While> | <Output> | <Input>
        productions = {
            4: self._assign,
            5: self._if,
            6: self._while,
            7: self._output,
            8: self._input,
        }
        number = self._select(NonTerminal.Instruction, INSTRUCTION_RULES)
        return Node(NonTerminal.Instruction, [productions[number]()])

    def _assign(self) -> Node:
        # [9] <Assign> -> [VarName] = <ExprArith>
        self._apply(9)
        return Node(NonTerminal.Assign, [
            self._match(LexicalUnit.VARNAME),
            self._match(LexicalUnit.ASSIGN),
            self._expr_arith(),
        ])

    def _expr_arith(self) -> Node:
        """
        Parse an arithmetic expression.

        [14] <ExprArith> -> <ExprArith> <Op> <ExprArith> is chosen when a
        complete operand is followed by a binary operator. The operand's
        rules are held back until that choice is made, so the trace stays
        in derivation order.

        Operands are read in a loop and folded into right-nested nodes,
        so a long chain of operators does not grow the call stack.
        """
        outer = self.trace
        steps = []

        while True:
            held = RecordingTrace()
            self.trace = held
            try:
                operand = self._operand()
            except (ParseError, LexerError):
                held.replay(outer)
                raise
            finally:
                self.trace = outer

            if self._lead_kind() != LexicalUnit.BINOP:
                held.replay(outer)
                break

            self._apply(BINARY_EXPR_RULE)
            held.replay(outer)
            steps.append((operand, self._op()))

        tree = operand
        for left, op in reversed(steps):
            tree = Node(NonTerminal.ExprArith, [left, op, tree])
        return tree

    def _lead_kind(self) -> LexicalUnit:
        """Look-ahead kind, with every binary operator folded into BINOP."""
        if self.current.is_binary_operator:
            return LexicalUnit.BINOP
        return self.current.kind

    def _operand(self) -> Node:
        # [10] <ExprArith> -> [VarName]
        # [11] <ExprArith> -> [Number]
        # [12] <ExprArith> -> ( <ExprArith> )
        # [13] <ExprArith> -> - <ExprArith>
        number = self._select(NonTerminal.ExprArith, EXPR_ARITH_RULES)

        if number == 10:
            children = [self._match(LexicalUnit.VARNAME)]
        elif number == 11:
            children = [self._match(LexicalUnit.NUMBER)]
        elif number == 12:
            children = [
                self._match(LexicalUnit.LPAREN),
                self._expr_arith(),
                self._match(LexicalUnit.RPAREN),
            ]
        else:
            children = [
                self._match(LexicalUnit.MINUS),
                self._expr_arith(),
            ]

        return Node(NonTerminal.ExprArith, children)

    def _op(self) -> Node:
        # [15-18] <Op> -> + | - | * | /
        kind = self.current.kind
        self._select(NonTerminal.Op, OP_RULES)
        return Node(NonTerminal.Op, [self._match(kind)])

    def _if(self) -> Node:
        # [19] <If> -> IF { <Cond> } THEN <Code> ELSE <Code> END
        self._apply(19)
        return Node(NonTerminal.If, [
            self._match(LexicalUnit.IF),
            self._match(LexicalUnit.LBRACK),
            self._cond(),
            self._match(LexicalUnit.RBRACK),
            self._match(LexicalUnit.THEN),
            self._code(THEN_CODE_RULES),
            self._match(LexicalUnit.ELSE),
            self._code(),
            self._match(LexicalUnit.END),
        ])

    def _cond(self) -> Node:
        # [20] <Cond> -> <ExprArith> <Comp> <ExprArith>
        self._apply(20)
        return Node(NonTerminal.Cond, [
            self._expr_arith(),
            self._comp(),
            self._expr_arith(),
        ])

    def _comp(self) -> Node:
        # [21-23] <Comp> -> == | <= | <
        kind = self.current.kind
        self._select(NonTerminal.Comp, COMP_RULES)
        return Node(NonTerminal.Comp, [self._match(kind)])

    def _while(self) -> Node:
        # [24] <While> -> WHILE { <Cond> } REPEAT <Code> END
        self._apply(24)
        return Node(NonTerminal.While, [
            self._match(LexicalUnit.WHILE),
            self._match(LexicalUnit.LBRACK),
            self._cond(),
            self._match(LexicalUnit.RBRACK),
            self._match(LexicalUnit.REPEAT),
            self._code(),
            self._match(LexicalUnit.END),
        ])

    def _output(self) -> Node:
        # [25] <Output> -> OUT ( [VarName] )
        self._apply(25)
        return Node(NonTerminal.Output, [
            self._match(LexicalUnit.OUT),
            self._match(LexicalUnit.LPAREN),
            self._match(LexicalUnit.VARNAME),
            self._match(LexicalUnit.RPAREN),
        ])

    def _input(self) -> Node:
        # [26] <Input> -> IN ( [VarName] )
        self._apply(26)
        return Node(NonTerminal.Input, [
            self._match(LexicalUnit.IN),
            self._match(LexicalUnit.LPAREN),
            self._match(LexicalUnit.VARNAME),
            self._match(LexicalUnit.RPAREN),
        ])


def parse_string(source: str, trace: Optional[RuleTrace] = None,
                 filename: str = "<string>") -> Node:
    """
    Convenience function to parse a source string.

    Raises:
        LexerError: If lexing fails
        ParseError: If parsing fails
    """
    return Parser(source, trace, filename).parse()


def parse_file(filepath: str, trace: Optional[RuleTrace] = None) -> Node:
    """
    Convenience function to parse a source file.

    Raises:
        LexerError: If lexing fails
        ParseError: If parsing fails
        OSError: If file cannot be read
    """
    with open(filepath, "r", encoding="utf-8") as f:
        return Parser(f, trace, filepath).parse()
