UNIT = 1024
SUFFIXES = 'KMGTPE'


def format_bytes(size: int) -> str:
    """Format byte count with 1024-based unit suffixes.

    Parameters
    ----------
    size : int
        Size in bytes.

    Returns
    -------
    str
        Plain integer below 1024, otherwise e.g. '1.50KB'.
    """
    if size < UNIT:
        return str(size)
    div, exp = UNIT, 0
    n = size // UNIT
    while n >= UNIT and exp < len(SUFFIXES) - 1:
        div *= UNIT
        exp += 1
        n //= UNIT
    return f'{size / div:.2f}{SUFFIXES[exp]}B'
