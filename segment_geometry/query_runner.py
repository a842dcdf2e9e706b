# Copyright 2025 Berkan Tali
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Main user entry point - orchestrates loading, evaluating, and exporting queries."""

import sys
import argparse
import logging
from pathlib import Path

from segment_geometry import job_io
from segment_geometry.logging_config import setup_logging
from segment_geometry.query_evaluator import QueryEvaluator

logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    """Parse command line arguments with smart defaults."""
    parser = argparse.ArgumentParser(
        description="Intersect line segments with planes, triangles and hexahedra from a YAML job",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Use default job
  %(prog)s

  # Specify input job
  %(prog)s --input my_job.yaml

  # Specify both input and output
  %(prog)s --input my_job.yaml --output my_results.json

  # Verbose output
  %(prog)s --input my_job.yaml --verbose
        """
    )

    default_job = Path(__file__).parent.parent / "config" / "example_job.yaml"

    parser.add_argument(
        '--input', '-i',
        type=str,
        default=str(default_job) if default_job.exists() else None,
        help='Input YAML job file (default: config/example_job.yaml)'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        default=None,
        help='Output JSON file (default: auto-generated in generated/ next to the input)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log detailed information during evaluation'
    )

    parser.add_argument(
        '--log-file',
        type=str,
        default=None,
        help='Also write the log to this file'
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Orchestrate loading, evaluating, and exporting of segment queries."""
    args = parse_arguments(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    if args.input is None:
        logger.error("No input file specified and default job not found")
        logger.error("Use --input to specify a YAML job file")
        return 1

    try:
        # Load Job
        logger.debug("Loading job from: %s", args.input)

        queries, config = job_io.load_query_job(args.input)

        if config.log_level and not args.verbose:
            setup_logging(config.log_level, args.log_file)

        logger.debug("  Job: %s", Path(args.input).stem)
        logger.debug("  Number of queries: %d", len(queries))
        logger.debug("  Settings: %r", config)

        # Evaluate Queries
        evaluator = QueryEvaluator(config)

        for query in queries:
            line = query.line_segment
            logger.debug("  Processing query '%s' against %s:", query.name, query.target_type)
            logger.debug("    Start: %s", line.start.tolist())
            logger.debug("    End:   %s", line.end.tolist())

            if not evaluator.evaluate(query):
                logger.error("Failed to evaluate query '%s'", query.name)
                return 1

        logger.info("Evaluated %d quer%s", len(queries), "y" if len(queries) == 1 else "ies")

        # Export to JSON
        if args.output is None:
            output_path = job_io.auto_generate_output_path(args.input)
            logger.debug("Auto-generated output path: %s", output_path)
        else:
            output_path = Path(args.output)

        metadata = {
            'input_file': str(Path(args.input).resolve()),
            'settings': config.to_dict(),
        }

        job_io.export_to_json(queries, output_path, metadata)
        logger.info("Results written to %s", output_path)

        return 0

    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1
    except ValueError as e:
        logger.error("Invalid job - %s", e)
        return 1
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        return 1


if __name__ == '__main__':
    sys.exit(main())
