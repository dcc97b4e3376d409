"""Brazilian Portuguese formatting for amounts and dates.

The SDK returns plain floats and dates; these helpers are for renderers.
"""

from datetime import date, datetime
from typing import Union

_UNITS = ["", "um", "dois", "três", "quatro", "cinco", "seis", "sete", "oito", "nove"]
_TEENS = ["dez", "onze", "doze", "treze", "quatorze", "quinze", "dezesseis", "dezessete", "dezoito", "dezenove"]
_TENS = ["", "dez", "vinte", "trinta", "quarenta", "cinquenta", "sessenta", "setenta", "oitenta", "noventa"]
_HUNDREDS = ["", "cento", "duzentos", "trezentos", "quatrocentos", "quinhentos",
             "seiscentos", "setecentos", "oitocentos", "novecentos"]


def format_currency(amount: float) -> str:
    """Format as Brazilian reais: 1234.5 -> 'R$ 1.234,50'."""
    sign = "-" if amount < 0 and round(abs(amount), 2) != 0 else ""
    us_style = f"{abs(amount):,.2f}"  # 1,234.50
    br_style = us_style.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {br_style}"


def format_date(value: Union[date, str, None]) -> str:
    """Format as dd/mm/yyyy. Accepts a date or an ISO 'YYYY-MM-DD' string."""
    if not value:
        return ""
    if isinstance(value, str):
        value = datetime.strptime(value, "%Y-%m-%d").date()
    return value.strftime("%d/%m/%Y")


def format_percent(rate: float) -> str:
    """0.075 -> '7,5%'."""
    text = f"{rate * 100:.2f}".rstrip("0").rstrip(".")
    return f"{text.replace('.', ',')}%"


def _group_in_words(n: int) -> str:
    """Words for 1..999."""
    if n == 100:
        return "cem"

    hundreds, rest = divmod(n, 100)
    tens, units = divmod(rest, 10)
    parts = []

    if hundreds:
        parts.append(_HUNDREDS[hundreds])
    if tens == 1:
        parts.append(_TEENS[units])
        return " e ".join(parts)
    if tens:
        parts.append(_TENS[tens])
    if units:
        parts.append(_UNITS[units])
    return " e ".join(parts)


def amount_in_words(amount: float) -> str:
    """Spell out an amount in reais, as written on receipts.

    Example: 1250.5 -> 'mil e duzentos e cinquenta reais e cinquenta centavos'

    The amount is rounded to cents first, so 1.999 reads 'dois reais'.
    Negative amounts are prefixed with 'menos'.
    """
    total_cents = round(abs(amount) * 100)
    if total_cents == 0:
        return "zero reais"

    reais, centavos = divmod(total_cents, 100)

    millions, remainder = divmod(reais, 1_000_000)
    thousands, rest = divmod(remainder, 1000)
    parts = []

    if millions:
        parts.append(_group_in_words(millions) + (" milhão" if millions == 1 else " milhões"))
    if thousands:
        if thousands == 1:
            parts.append("mil" if not millions else "um mil")
        else:
            parts.append(_group_in_words(thousands) + " mil")
    if rest:
        parts.append(_group_in_words(rest))

    text = " e ".join(parts)
    if reais:
        text += " real" if reais == 1 else " reais"

    if centavos:
        cents = _group_in_words(centavos) + (" centavo" if centavos == 1 else " centavos")
        text = f"{text} e {cents}" if text else cents

    return f"menos {text}" if amount < 0 else text
