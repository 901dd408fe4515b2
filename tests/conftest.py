"""Test configuration and fixtures."""

import logfire

# Keep telemetry local; logfire calls in the code under test become no-ops
logfire.configure(send_to_logfire=False, console=False)
