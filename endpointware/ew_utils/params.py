import io
from typing import Any, List, Mapping, Tuple

Field = Tuple[str, Any]


def _is_binary(value: Any) -> bool:
    if isinstance(value, (bytes, bytearray)):
        return True
    return isinstance(value, io.IOBase) and not isinstance(value, io.TextIOBase)


def _is_file_value(value: Any) -> bool:
    """Bytes, a binary file, or a ``(filename, content[, type])`` tuple whose
    content is bytes or a binary file."""
    if _is_binary(value):
        return True
    return (
        isinstance(value, tuple)
        and len(value) in (2, 3)
        and (value[0] is None or isinstance(value[0], str))
        and _is_binary(value[1])
    )


def flatten_value(fields: List[Field], name: str, value: Any) -> None:
    """Append ``value`` to ``fields`` using bracket notation for nesting.

    - dict -> name[key]=value
    - list, tuple or set of scalars -> name[]=a, name[]=b
    - list of dicts -> name[0][key]=value
    - None is skipped
    - file values are kept whole
    """
    if value is None:
        return

    if _is_file_value(value):
        fields.append((name, value))
        return

    if isinstance(value, Mapping):
        for k, v in value.items():
            flatten_value(fields, f"{name}[{k}]", v)
        return

    if isinstance(value, (list, tuple, set)):
        for idx, item in enumerate(value):
            if isinstance(item, Mapping):
                flatten_value(fields, f"{name}[{idx}]", item)
            else:
                flatten_value(fields, f"{name}[]", item)
        return

    fields.append((name, value))


def encode_query(data: Mapping[str, Any]) -> List[Field]:
    """Encode a residual payload as query string parameters."""
    fields: List[Field] = []
    for name, value in data.items():
        flatten_value(fields, name, value)

    params: List[Field] = []
    for name, value in fields:
        if isinstance(value, bool):
            value = "true" if value else "false"
        params.append((name, value))
    return params


def encode_form(data: Mapping[str, Any]) -> List[Field]:
    """Encode a residual payload as multipart form fields.

    Plain values become ``(None, str(value))`` parts so they are sent without
    a filename. Bytes, binary files and ``(filename, content[, type])`` tuples
    with bytes or binary-file content are passed through as file parts; any
    other tuple is treated like a list of values.
    """
    form: List[Field] = []
    for name, value in data.items():
        fields: List[Field] = []
        flatten_value(fields, name, value)
        for fname, fvalue in fields:
            if _is_file_value(fvalue):
                form.append((fname, fvalue))
            elif isinstance(fvalue, bool):
                form.append((fname, (None, "1" if fvalue else "0")))
            else:
                form.append((fname, (None, str(fvalue))))
    return form
