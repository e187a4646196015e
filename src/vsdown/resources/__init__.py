"""Desktop-integration assets installed alongside the release."""
