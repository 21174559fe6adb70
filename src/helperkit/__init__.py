"""helperkit

Small, stateless helpers with minimal dependencies: non-empty sequence
handling, explicit assertions, optional-value mapping, string affix stripping
and boolean counting.

Organisation:
- One single-purpose module per concern (``sequence``, ``assertions``,
  ``nullable``, ``strings``, ``booleans``) rather than one catch-all file.
- Helpers are pure functions. None of them reads configuration or performs I/O.
- ``errors``, ``logging`` and ``config`` hold the cross-cutting pieces.

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules to avoid incidental coupling.
"""

import logging

__all__ = ["__version__"]
__version__ = "0.1.0"

# Library default: stay silent unless the application configures handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())
