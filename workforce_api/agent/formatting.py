from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

MONTH_NAMES = [
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
]


def month_name(month) -> str:
    try:
        m = int(month)
    except (TypeError, ValueError):
        return str(month)
    return MONTH_NAMES[m - 1] if 1 <= m <= 12 else str(month)


def format_currency(amount) -> str:
    """BRL, pt-BR style: 1234.5 -> 'R$ 1.234,50'"""
    try:
        x = Decimal(str(amount if amount is not None else 0))
    except InvalidOperation:
        return str(amount)
    x = x.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if x < 0 else ""
    # thousands with '.', decimals with ','
    s = f"{abs(x):,.2f}".replace(",", " ").replace(".", ",").replace(" ", ".")
    return f"{sign}R$ {s}"
