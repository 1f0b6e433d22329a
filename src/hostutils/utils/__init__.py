"""Support namespace for small, dependency-light string helpers.

Scope:
- Stateless helpers over host names and URLs (common-suffix computation,
  suffix stripping, scheme-checked URL parsing).
- No I/O, no logging, no wiring. Pure functions only.

Import direction:
- May be imported by any hostutils package.
- Must not import from the CLI. Keep dependencies to the standard library.

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules (``hostutils.utils.suffix``, ``hostutils.utils.urls``).
"""
