"""Run the admission webhook server."""

import sys
from pathlib import Path

import cyclopts
import logfire
import uvicorn

from regcred.cli.console import get_console
from regcred.config import Config
from regcred.domain.shared.error import ConfigurationError

app = cyclopts.App(name="serve", help="Run the mutating webhook server")

CERT_FILE = "tls.crt"
KEY_FILE = "tls.key"


def _tls_files(cert_dir: Path | None) -> tuple[str | None, str | None]:
    """Locate tls.crt/tls.key, or run plain HTTP when no directory is given."""
    if cert_dir is None:
        return None, None
    cert, key = cert_dir / CERT_FILE, cert_dir / KEY_FILE
    for path in (cert, key):
        if not path.exists():
            raise ConfigurationError(f"TLS file not found: {path}")
    return str(cert), str(key)


@app.default
def serve(
    host: str = "0.0.0.0",
    port: int = 9443,
    cert_dir: Path | None = None,
) -> None:
    """Start the webhook in the foreground.

    Args:
        host: Host to bind to.
        port: Port to listen on.
        cert_dir: Directory containing tls.crt and tls.key. The API server only
            talks to webhooks over TLS, so leave this unset for local testing only.
    """
    console = get_console()
    config = Config()  # type: ignore[call-arg]

    try:
        config.validate_injector()
        certfile, keyfile = _tls_files(cert_dir)
    except ConfigurationError as e:
        console.error(e.message, hint="See REGCRED_* environment variables or REGCRED_CONFIG_FILE")
        sys.exit(1)

    # Logfire must be configured before the app is created
    logfire.configure(service_name=config.server.name, send_to_logfire="if-token-present")

    scheme = "https" if certfile else "http"
    console.success(
        f"Injecting {config.injector.secret_namespace}/{config.injector.secret_name} "
        f"for {config.injector.domain}, listening on {scheme}://{host}:{port}"
    )

    uvicorn.run(
        "regcred.application.api.rest.app:create_app",
        factory=True,
        host=host,
        port=port,
        ssl_certfile=certfile,
        ssl_keyfile=keyfile,
        log_config=None,
    )
