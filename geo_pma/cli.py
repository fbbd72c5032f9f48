#!/usr/bin/env python3

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

import requests

from .models import FeatureKind, PmaModel, ModelValidationError, PreconditionError
from .export import TranscodingWriter, WriterPolicy, EMITTABLE_KINDS
from .sources import AiswebSource, LocalFileSource, SourceInterface, DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

# Order the original tool wrote its files in
DEFAULT_OUTPUT_ORDER = [
    FeatureKind.WAYPOINT,
    FeatureKind.NDB,
    FeatureKind.VOR,
    FeatureKind.AIRPORT,
    FeatureKind.COMPLETE_THRESHOLD,
]

# Layers that must be fetched to produce each output kind
REQUIRED_LAYERS: Dict[FeatureKind, List[FeatureKind]] = {
    FeatureKind.WAYPOINT: [FeatureKind.WAYPOINT],
    FeatureKind.NDB: [FeatureKind.NDB],
    FeatureKind.VOR: [FeatureKind.VOR],
    FeatureKind.AIRPORT: [FeatureKind.AIRPORT],
    FeatureKind.COMPLETE_THRESHOLD: [FeatureKind.RUNWAY, FeatureKind.THRESHOLD, FeatureKind.AIRPORT],
}


def required_layers(kinds: List[FeatureKind]) -> List[FeatureKind]:
    """Layers to fetch for the requested outputs, without duplicates, in fetch order."""
    layers: List[FeatureKind] = []
    for kind in kinds:
        for layer in REQUIRED_LAYERS[kind]:
            if layer not in layers:
                layers.append(layer)
    return layers


class PmaExporter:
    """Fetches the layers, completes thresholds and writes the PMA files."""

    def __init__(self, args):
        """Initialize the exporter from parsed command line arguments."""
        self.args = args
        self.kinds = [FeatureKind.from_token(t) for t in args.kinds] if args.kinds else list(DEFAULT_OUTPUT_ORDER)
        self.policy = WriterPolicy.strict() if args.strict else WriterPolicy()
        self.source = self._create_source()

    def _create_source(self) -> SourceInterface:
        if self.args.input_dir:
            return LocalFileSource(self.args.input_dir)
        source = AiswebSource(
            cache_dir=self.args.cache_dir,
            username=self.args.username,
            password=self.args.password,
            base_url=self.args.base_url,
            timeout=self.args.timeout,
            max_age_days=self.args.max_age_days,
        )
        if self.args.force_refresh:
            source.set_force_refresh()
        if self.args.never_refresh:
            source.set_never_refresh()
        return source

    def build_model(self) -> PmaModel:
        """
        Load every layer the requested outputs need.

        Raises:
            ModelValidationError, requests.RequestException, OSError, ValueError:
                If any layer cannot be obtained or decoded
        """
        model = PmaModel()
        layers = required_layers(self.kinds)
        logger.info(f"Loading layers: {', '.join(k.token for k in layers)}")
        self.source.update_model(model, layers)
        return model

    def run(self) -> int:
        """
        Run the export.

        Returns:
            Process exit status
        """
        try:
            model = self.build_model()
        except (ModelValidationError, requests.RequestException, OSError, ValueError) as e:
            logger.error(f"Could not obtain feature data: {e}")
            return 1

        records = {}
        try:
            for kind in self.kinds:
                records[kind] = model.get_collection(kind)
        except PreconditionError as e:
            logger.error(f"Cannot complete thresholds: {e}")
            return 1

        output_directory = self.args.output_directory
        if output_directory is not None and not Path(output_directory).is_dir():
            logger.warning(f"{output_directory} is not a directory, writing to the current directory")

        writer = TranscodingWriter(output_directory, self.policy)
        for kind in self.kinds:
            try:
                report = writer.write(kind, records[kind])
            except OSError as e:
                logger.error(f"Something went wrong writing {kind.filename}: {e}")
                if self.args.strict:
                    return 1
                continue
            if not report.complete:
                logger.warning(f"{report.failed} lines could not be written to {report.path}")
            print(f"Created {kind.label} DB.")

        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Convert AISWEB GeoServer layers into PMA text databases')

    allowed = ', '.join(k.token for k in EMITTABLE_KINDS)
    parser.add_argument('kinds', nargs='*', metavar='KIND',
                        help=f'Databases to create, any of {allowed} (default: all)')

    # Input
    parser.add_argument('-i', '--input-dir', help='Read GeoJSON layers from this directory instead of GeoServer')
    parser.add_argument('--base-url', help='GeoServer WFS endpoint',
                        default=os.environ.get('GEO_PMA_BASE_URL', DEFAULT_BASE_URL))
    parser.add_argument('--username', help='GeoServer username', default=os.environ.get('GEO_PMA_USERNAME'))
    parser.add_argument('--password', help='GeoServer password', default=os.environ.get('GEO_PMA_PASSWORD'))
    parser.add_argument('--timeout', help='Request timeout in seconds', type=float, default=60)

    # Cache
    parser.add_argument('-c', '--cache-dir', help='Directory to cache fetched layers (disabled if omitted)')
    parser.add_argument('--max-age-days', type=int, default=0,
                        help='Reuse cached layers whose age in whole days is at most this (0: last 24 hours)')
    parser.add_argument('--force-refresh', help='Force refresh of cached data', action='store_true')
    parser.add_argument('--never-refresh', help='Never refresh cached data if it exists', action='store_true')

    # Output
    parser.add_argument('-o', '--output-directory', help='Directory to save the generated txt files',
                        metavar='PATH')
    parser.add_argument('--strict', help='Abort on the first file creation or write failure', action='store_true')

    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    for token in args.kinds:
        if token not in [k.token for k in EMITTABLE_KINDS]:
            parser.error(f"Unknown database '{token}'. Allowed: {', '.join(k.token for k in EMITTABLE_KINDS)}")

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    return PmaExporter(args).run()


if __name__ == '__main__':
    sys.exit(main())
