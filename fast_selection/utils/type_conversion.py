def str_to_str_list(s, sep=','):
    if s is None:
        return []
    return [item.strip() for item in s.split(sep) if item.strip()]


def str_to_int_list(s, sep=','):
    return [int(item) for item in str_to_str_list(s, sep)]


def str_to_number(s):
    """Parse s as int, else float, else keep the string"""
    for convert in (int, float):
        try:
            return convert(s)
        except ValueError:
            pass
    return s
