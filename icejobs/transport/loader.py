import importlib

from icejobs.errors import TransportConfigError

from .protocols import Discovery


def load_transport(import_path: str | None) -> Discovery:
    """
    Import a transport given as ``package.module:attribute``.

    The attribute may be a Discovery object, or a zero-argument callable
    (typically the transport's class) that returns one.
    """
    if not import_path:
        raise TransportConfigError(
            "No scheduler transport configured, set ICEJOBS_TRANSPORT to package.module:attribute"
        )

    module_name, _, attribute_name = import_path.partition(":")
    if not module_name or not attribute_name:
        raise TransportConfigError(
            f"Invalid transport path {import_path!r}, expected package.module:attribute"
        )

    try:
        module = importlib.import_module(module_name)

    except ImportError as err:
        raise TransportConfigError(
            f"Could not import transport module {module_name!r}: {err}"
        ) from err

    transport = getattr(module, attribute_name, None)
    if transport is None:
        raise TransportConfigError(
            f"Transport module {module_name!r} has no attribute {attribute_name!r}"
        )

    if isinstance(transport, type) or (
        callable(transport) and not hasattr(transport, "start")
    ):
        transport = transport()

    if not callable(getattr(transport, "start", None)):
        raise TransportConfigError(
            f"Transport {import_path!r} does not provide start(network_name)"
        )

    return transport
