"""Safe evaluation of normalized arithmetic expressions."""

import math
import re
from typing import List, Optional, Tuple

from ..exceptions import EvaluationError
from ..models.data_structures import MathOutcome
from .expression_normalizer import ExpressionNormalizer

TOKEN_PATTERN = re.compile(r'\s*(?:(\d+\.?\d*|\.\d+)|([-+*/()]))')

Token = Tuple[str, str]


def tokenize(expression: str) -> List[Token]:
    """Split an expression into ('num', text) and ('op', symbol) tokens."""
    tokens = []
    pos = 0
    expression = expression.rstrip()
    while pos < len(expression):
        match = TOKEN_PATTERN.match(expression, pos)
        if not match:
            raise EvaluationError(f"unexpected character {expression[pos]!r} at {pos}")
        number, operator = match.groups()
        tokens.append(('num', number) if number is not None else ('op', operator))
        pos = match.end()
    return tokens


class _Parser:
    """Recursive-descent parser over the token list.

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := ('+' | '-') factor | '(' expression ')' | number
    """
    
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0
    
    def peek(self) -> Optional[Token]:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None
    
    def advance(self) -> Token:
        token = self.peek()
        if token is None:
            raise EvaluationError("unexpected end of expression")
        self.pos += 1
        return token
    
    def parse(self) -> float:
        if not self.tokens:
            raise EvaluationError("empty expression")
        value = self.expression()
        if self.peek() is not None:
            raise EvaluationError(f"unexpected token {self.peek()[1]!r}")
        return value
    
    def expression(self) -> float:
        value = self.term()
        while self.peek() in (('op', '+'), ('op', '-')):
            operator = self.advance()[1]
            right = self.term()
            value = value + right if operator == '+' else value - right
        return value
    
    def term(self) -> float:
        value = self.factor()
        while self.peek() in (('op', '*'), ('op', '/')):
            operator = self.advance()[1]
            right = self.factor()
            if operator == '*':
                value = value * right
            elif right == 0:
                raise EvaluationError("division by zero")
            else:
                value = value / right
        return value
    
    def factor(self) -> float:
        kind, text = self.advance()
        if kind == 'num':
            return float(text)
        if text == '-':
            return -self.factor()
        if text == '+':
            return self.factor()
        if text == '(':
            value = self.expression()
            if self.advance() != ('op', ')'):
                raise EvaluationError("unbalanced parentheses")
            return value
        raise EvaluationError(f"unexpected token {text!r}")


def format_number(value: float) -> str:
    """Integers without a trailing '.0', everything else as repr."""
    if value == 0:
        return "0"
    if value.is_integer():
        return str(int(value))
    return repr(value)


class ArithmeticEvaluator:
    """Evaluates normalized expressions, flagging ones with unknowns"""
    
    def __init__(self, normalizer=None):
        self.normalizer = normalizer or ExpressionNormalizer()
    
    @staticmethod
    def evaluate_expression(expression: str) -> float:
        """Evaluate a normalized expression or raise EvaluationError."""
        try:
            value = _Parser(tokenize(expression)).parse()
        except (OverflowError, RecursionError) as e:
            raise EvaluationError(f"cannot evaluate {expression!r}: {e}") from e
        if not math.isfinite(value):
            raise EvaluationError(f"result of {expression!r} overflows")
        return value
    
    def evaluate(self, expression: str, candidate: Optional[str] = None) -> MathOutcome:
        """Evaluate ``expression``, normalized from the raw ``candidate``.

        The unknown check looks at the raw candidate because normalization
        strips letters.
        """
        candidate = expression if candidate is None else candidate
        display = self.normalizer.display_form(candidate) or expression
        
        if self.normalizer.has_variable(candidate):
            return MathOutcome.symbolic(expression, display)
        
        value = self.evaluate_expression(expression)
        return MathOutcome.solved(expression, format_number(value), display)
