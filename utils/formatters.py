from datetime import date, datetime, timezone, tzinfo
from typing import Optional, Union


def format_number(value: Optional[int]) -> str:
    """
    Formatea un entero con separador de miles (formato es-ES: 12.345).
    """
    return f"{int(value or 0):,}".replace(",", ".")


def format_datetime(
    value: Optional[Union[str, date, datetime]],
    tz: Optional[tzinfo] = None,
) -> str:
    """
    Formatea fechas como en es-ES: 19/10/2026, 14:05:03.
    Acepta datetime, date o texto ISO 8601; None devuelve "".

    Los datetime sin zona se guardan en UTC y se convierten a tz (o a la
    zona local del servidor si tz es None).
    """
    if value is None or value == "":
        return ""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(tz).strftime("%d/%m/%Y, %H:%M:%S")
    return value.strftime("%d/%m/%Y")


def truncate(text: Optional[str], limit: int = 40) -> str:
    text = text or ""
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + "..."
