from typing import Optional

def parse_int(text: Optional[str]) -> Optional[int]:
    """Целое число из пользовательского ввода или None"""
    if text is None:
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None

def is_confirmation(answer: Optional[str]) -> bool:
    return (answer or "").strip().lower() in ("да", "д", "yes", "y")
