"""Text serialization of statement lines in the SCVS upload format.

Each line is ``<code>\\t<value>``, lines are joined with a single newline and
there is no trailing newline. Values always carry two decimals, a dot as
decimal separator and no thousands grouping: ``1234.5`` -> ``1234.50``.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable, Sequence

from scvs_export.domain.entities import StatementLine
from scvs_export.domain.errors import ValidationError

CENT = Decimal("0.01")
FIELD_SEPARATOR = "\t"
LINE_SEPARATOR = "\n"


def format_value(value: Decimal | int | float) -> str:
    """Format a value with exactly two decimals, no grouping.

    Halves round away from zero. A value that rounds to zero is written as
    ``0.00``, never ``-0.00``.
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    quantized = value.quantize(CENT, rounding=ROUND_HALF_UP)
    if quantized.is_zero():
        quantized = abs(quantized)
    return f"{quantized:f}"


def serialize_lines(lines: Iterable[StatementLine]) -> str:
    """Render statement lines as export text."""
    return LINE_SEPARATOR.join(
        f"{line.code}{FIELD_SEPARATOR}{format_value(line.value)}" for line in lines
    )


def parse_lines(text: str) -> list[StatementLine]:
    """Parse export text back into statement lines.

    Raises:
        ValidationError: If a line is not ``<code>\\t<decimal>``
    """
    if not text:
        return []
    lines: list[StatementLine] = []
    for line_number, raw in enumerate(text.split(LINE_SEPARATOR), start=1):
        parts: Sequence[str] = raw.split(FIELD_SEPARATOR)
        if len(parts) != 2 or not parts[0]:
            raise ValidationError(f"Line {line_number}: expected '<code>\\t<value>'")
        try:
            value = Decimal(parts[1])
        except InvalidOperation:
            raise ValidationError(f"Line {line_number}: invalid value '{parts[1]}'")
        lines.append(StatementLine(code=parts[0], value=value))
    return lines
