"""
Main entry point for the geomag web service.

Runs a single web service request from the command line.
"""

import sys
from typing import Dict, List, Optional, Union

from .core import Config, setup_logger
from .api import WaveServerAPI
from .services import load_observatories
from .service import GeomagWebService, ServiceResponse


class GeomagServiceApp:
    """Command line application wrapping GeomagWebService."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
        """
        self.config = Config(config_file)

        self.logger = setup_logger(
            log_file=self.config.log_file,
            log_level=self.config.log_level
        )
        self.logger.debug(f"Configuration: {self.config}")

        self.wave_server: Optional[WaveServerAPI] = None
        self.service: Optional[GeomagWebService] = None

    def initialize_components(self) -> None:
        """Initialize the wave server client, metadata and service."""
        self.wave_server = WaveServerAPI(
            base_url=self.config.waveserver_base_url,
            timeout=self.config.waveserver_timeout,
            max_retries=self.config.waveserver_max_retries,
            verify_ssl=self.config.waveserver_verify_ssl,
            logger=self.logger
        )

        observatories = load_observatories(self.config.metadata_file, logger=self.logger)

        self.service = GeomagWebService(
            fetch_series=self.wave_server.fetch_series,
            observatories=observatories,
            logger=self.logger
        )

    def run(self, params: Dict[str, Union[str, List[str]]]) -> ServiceResponse:
        """
        Handle one request.

        Args:
            params: Request parameters

        Returns:
            Service response
        """
        try:
            self.initialize_components()
            if self.service is None:
                raise RuntimeError("Components not properly initialized")
            return self.service.handle(params)
        finally:
            if self.wave_server:
                self.wave_server.close()


def parse_params(pairs: List[str]) -> Dict[str, Union[str, List[str]]]:
    """
    Parse ``name=value`` arguments into request parameters.

    A name given more than once collects its values into a list.

    Raises:
        ValueError: If an argument has no '='
    """
    params: Dict[str, Union[str, List[str]]] = {}
    for pair in pairs:
        if "=" not in pair:
            raise ValueError(f"Expected name=value, got: {pair}")
        name, value = pair.split("=", 1)
        if name in params:
            existing = params[name]
            if isinstance(existing, list):
                existing.append(value)
            else:
                params[name] = [existing, value]
        else:
            params[name] = value
    return params


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Geomagnetic Data Web Service"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the response body to this file instead of stdout"
    )
    parser.add_argument(
        "params",
        nargs="*",
        help="Request parameters as name=value, e.g. id=BOU elements=H,E,Z,F"
    )

    args = parser.parse_args()

    try:
        params = parse_params(args.params)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        sys.exit(2)

    try:
        app = GeomagServiceApp(config_file=args.config)
        response = app.run(params)
    except Exception as e:
        print(f"Application failed: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        with open(args.output, "wb") as f:
            f.write(response.body)
    else:
        sys.stdout.buffer.write(response.body)
        sys.stdout.flush()

    if not response.ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
