"""
package: mstair.i18n.base
"""

# <AUTOGEN_INIT>
from mstair.i18n.base import (
    config,
    string_helpers,
    types,
)


__all__ = [
    "config",
    "string_helpers",
    "types",
]
# </AUTOGEN_INIT>
