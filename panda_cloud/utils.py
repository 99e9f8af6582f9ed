import dataclasses


def format_table(headers, rows):
    """
    Render rows as a plain text table.

    Args:
        headers: Column titles
        rows: Iterable of row sequences; None cells render empty

    Returns:
        list of lines, e.g.

        +----------+---------+
        | Video id | Status  |
        +----------+---------+
        | abc      | success |
        +----------+---------+
    """
    cells = [['' if value is None else str(value) for value in row] for row in rows]
    widths = [len(str(header)) for header in headers]
    for row in cells:
        for i, value in enumerate(row):
            widths[i] = max(widths[i], len(value))

    border = '+' + '+'.join('-' * (width + 2) for width in widths) + '+'

    def line(values):
        return '| ' + ' | '.join(value.ljust(width) for value, width in zip(values, widths)) + ' |'

    lines = [border, line([str(header) for header in headers]), border]
    lines.extend(line(row) for row in cells)
    if cells:
        lines.append(border)
    return lines


def format_fields(instance, skip_empty=True):
    """
    Render the fields of a model object as "name: value" lines.

    Args:
        instance: A dataclass instance from panda_cloud.models
        skip_empty: Leave out fields that are None

    Returns:
        list of lines with the field names padded to the same width
    """
    items = [(f.name, getattr(instance, f.name)) for f in dataclasses.fields(instance)]
    if skip_empty:
        items = [(name, value) for name, value in items if value is not None]
    if not items:
        return []

    width = max(len(name) for name, _ in items)
    return [f'{name.ljust(width)}: {value}' for name, value in items]
