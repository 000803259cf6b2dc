"""Console encoding resolution and Windows code page lookup."""

import codecs

from msbuild_console.core.exceptions import EncodingConfigError

# Windows code page identifiers, keyed by codec alias. Passed to ``chcp`` so
# that MSBuild writes its console output in the encoding we decode with.
_CODE_PAGE_ALIASES: dict[str, int] = {
    "utf-8": 65001,
    "utf-16": 1200,
    "utf-32": 12000,
    "utf-32-be": 12001,
    "ascii": 20127,
    "latin-1": 28591,
    "iso8859-2": 28592,
    "iso8859-3": 28593,
    "iso8859-4": 28594,
    "iso8859-5": 28595,
    "iso8859-6": 28596,
    "iso8859-7": 28597,
    "iso8859-8": 28598,
    "iso8859-9": 28599,
    "iso8859-13": 28603,
    "iso8859-15": 28605,
    "koi8-r": 20866,
    "koi8-u": 21866,
    "shift_jis": 932,
    "euc_jp": 20932,
    "euc_kr": 51949,
    "iso2022_jp": 50220,
    "iso2022_kr": 50225,
    "big5": 950,
    "gb2312": 936,
    "gb18030": 54936,
    "cp037": 37,
    "cp273": 20273,
    "cp437": 437,
    "cp500": 500,
    "cp775": 775,
    "cp850": 850,
    "cp852": 852,
    "cp855": 855,
    "cp857": 857,
    "cp858": 858,
    "cp860": 860,
    "cp861": 861,
    "cp863": 863,
    "cp864": 864,
    "cp865": 865,
    "cp869": 869,
    "cp1026": 1026,
    "cp1140": 1140,
    "cp1250": 1250,
    "cp1251": 1251,
    "cp1252": 1252,
    "cp1253": 1253,
    "cp1254": 1254,
    "cp1255": 1255,
    "cp1256": 1256,
    "cp1257": 1257,
    "cp1258": 1258,
}

_CODE_PAGES: dict[str, int] = {
    codecs.lookup(alias).name: cpi for alias, cpi in _CODE_PAGE_ALIASES.items()
}


def resolve_encoding(name: str) -> str:
    """
    Resolve an encoding name to its canonical codec name.

    Args:
        name: Encoding name or alias (e.g. ``UTF-8``, ``windows-1252``)

    Returns:
        Canonical Python codec name

    Raises:
        EncodingConfigError: If no codec is registered under that name
    """
    try:
        return codecs.lookup(name.strip()).name
    except LookupError as e:
        raise EncodingConfigError(f"Unknown console encoding: {name!r}", encoding=name) from e


def code_page_for(name: str) -> int:
    """Return the Windows code page identifier for an encoding, or 0 if there is none."""
    try:
        canonical = codecs.lookup(name.strip()).name
    except LookupError:
        return 0
    return _CODE_PAGES.get(canonical, 0)
