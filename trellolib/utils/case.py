"""Key case conversion between python attribute names and Trello JSON keys."""


def convert_string_to_camel_case(snake_str):
    """Convert a snake_case string to camelCase."""
    if not isinstance(snake_str, str):
        raise TypeError("Input must be a string")
    components = snake_str.split("_")
    if len(components) == 1:
        return components[0]
    else:
        return components[0] + "".join(
            x[0].upper() + x[1:] if x else "" for x in components[1:]
        )
