"""Lookup of function names for well-known DLLs that export by ordinal."""

from dataclasses import dataclass, field

from . import ordinals_oleaut32, ordinals_ws2_32


@dataclass
class OrdinalsMap:
    """Ordinal-to-name table for one DLL."""

    dll_name: str = ""
    ord_names: dict = field(default_factory=dict)


def _ws2_32_map():
    return OrdinalsMap(ordinals_ws2_32.DLL_NAME, dict(ordinals_ws2_32.ORDINAL_NAMES))


def _oleaut32_map():
    return OrdinalsMap(ordinals_oleaut32.DLL_NAME, dict(ordinals_oleaut32.ORDINAL_NAMES))


class CommonOrdinalsLookup:
    """Resolves ordinals of common system DLLs to function names."""

    def __init__(self):
        self._maps = {}
        self._init()

    def _init(self):
        self._maps["wsock32"] = _ws2_32_map()
        self._maps["ws2_32"] = _ws2_32_map()
        self._maps["oleaut32"] = _oleaut32_map()

    def find_func_name(self, dll_name, ordinal):
        """Return the function name for ``ordinal`` in ``dll_name``, or None if unknown.

        The DLL name is matched case-insensitively and without its extension.
        """
        ordinals_map = self._maps.get(dll_name.lower())
        if ordinals_map is None:
            return None
        return ordinals_map.ord_names.get(ordinal)

    def clear(self):
        """Drop all registered tables."""
        self._maps.clear()