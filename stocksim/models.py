"""Core data types: goals, resources, processes and exact ratios."""

from __future__ import annotations

from dataclasses import dataclass, field


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, _trunc_mod(a, b)
    return a


def lcm(values) -> int:
    """Least common multiple of a sequence; 0 if empty or if any value is 0."""
    values = list(values)
    if not values:
        return 0
    m = values[0]
    for n in values[1:]:
        if n == 0 or m == 0:
            return 0
        m = _trunc_div(m * n, gcd(m, n))
    return m


@dataclass(frozen=True)
class Rational:
    """A ratio of two integers."""

    numerator: int = 0
    denominator: int = 0

    def plus(self, other: Rational) -> Rational:
        """Sum of two ratios, left unreduced."""
        return Rational(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def times(self, other: Rational) -> Rational:
        """Product of two ratios, reduced to lowest terms."""
        return Rational(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        ).simplified()

    def simplified(self) -> Rational:
        """This ratio in lowest terms; 0/0 when both parts are zero."""
        divisor = gcd(self.numerator, self.denominator)
        if divisor == 0:
            return Rational(0, 0)
        return Rational(
            _trunc_div(self.numerator, divisor),
            _trunc_div(self.denominator, divisor),
        )


@dataclass
class Goal:
    """What the configuration asks to optimize."""

    product: str = ""
    time: bool = False


@dataclass
class Resource:
    """A named quantity of stock."""

    name: str
    quantity: int
    ubik: bool = False


@dataclass(eq=False)
class Process:
    """A process turning ingredients into products, plus scheduling state."""

    name: str
    ingredients: list[Resource] = field(default_factory=list)
    products: list[Resource] = field(default_factory=list)
    time: int = 0
    successor: Process | None = field(default=None, repr=False)
    predecessors: list[Process] = field(default_factory=list, repr=False)
    initial: bool = False
    final: bool = False
    min_count: Rational = field(default_factory=Rational)
    count: int = 0
    start: int = 0
    iterations: int = 0
    doable: bool = False
    added: int = 0