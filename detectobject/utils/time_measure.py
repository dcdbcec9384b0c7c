_UNITS = (("h", 3600), ("m", 60), ("s", 1))


def measure_time(sec):
    """
    Format an elapsed duration for the end-of-run summary lines.
    Sub-second runs are shown in milliseconds, longer ones drop leading zero units.
    :param sec: Time in seconds.
    :return: e.g. "850 ms", "45s", "1m 23s", "1h 0m 5s".
    """
    if sec < 1:
        return f"{sec * 1000.0:.0f} ms"
    left = int(sec)
    parts = []
    for unit, size in _UNITS:
        n, left = divmod(left, size)
        if n or parts:
            parts.append(f"{n}{unit}")
    return " ".join(parts)
