"""hostutils

Small string and diagnostic-timing helpers shared by cluster client code:
common-suffix computation for host names, suffix stripping, a URL parser
that insists on a scheme, and enter/exit tracers that log slow calls.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
