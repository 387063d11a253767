#!/usr/bin/env python3

"""
Quant Cloud Init Script

CLI entry point using the Functional Core, Imperative Shell pattern.
Ref classification and target resolution are pure functions, the API
client and the I/O layer hold all side effects.
"""

import os
import sys

from .environment import EnvironmentConfig
from .exceptions import QuantInitError
from .initializer import run_init
from .io_layer import IOLayer
from .output_generation import build_outputs
from .quant_client import QuantClient
from .utils import setup_logging


def main():
    """Main entry point - parse, validate, run, publish."""
    setup_logging()
    try:
        # Step 1: Parse environment
        config = EnvironmentConfig.from_env(os.environ)

        # Step 2: Validate configuration
        errors = config.validate()
        if errors:
            for error in errors:
                print(f"Error: {error}")
            sys.exit(1)

        # Step 3: Setup API client and I/O layer
        client = QuantClient(config.api_key, config.base_url)
        io_layer = IOLayer(config.github_output)

        # Step 4: Resolve, validate and log in
        result = run_init(config, client, io_layer)

        # Step 5: Publish outputs
        io_layer.write_outputs(build_outputs(result))
    except QuantInitError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {type(e).__name__}")
        sys.exit(1)


if __name__ == "__main__":
    main()
