from typing import Callable, Iterable, Optional, cast

from exprcalc.tokens import Operator, OperatorToken, Token, is_operator


class TokenCursor:
    """One-token lookahead over any iterable of tokens"""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = iter(tokens)
        self._lookahead: Optional[Token] = None
        self._consumed: list[Token] = []

    def peek(self) -> Optional[Token]:
        if self._lookahead is None:
            self._lookahead = next(self._tokens, None)
        return self._lookahead

    def advance(self) -> Optional[Token]:
        token = self.peek()
        if token is not None:
            self._consumed.append(token)
            self._lookahead = None
        return token

    def match(self, predicate: Callable[[Token], bool]) -> Optional[Token]:
        """Consumes the next token only if it satisfies the predicate"""
        token = self.peek()
        if token is not None and predicate(token):
            return self.advance()
        return None

    def match_operator(self, *operators: Operator) -> Optional[OperatorToken]:
        return cast(Optional[OperatorToken], self.match(lambda t: is_operator(t, *operators)))

    def at_end(self) -> bool:
        return self.peek() is None

    @property
    def position(self) -> int:
        return len(self._consumed)

    def seen(self) -> list[Token]:
        """Consumed tokens followed by everything left, without moving the cursor"""
        rest = [] if self._lookahead is None else [self._lookahead]
        rest.extend(self._tokens)
        self._lookahead = None
        self._tokens = iter(rest)
        return self._consumed + rest
