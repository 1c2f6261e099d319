"""Allow ``python -m proof_reader``."""

from proof_reader.presentation.cli.app import main

main()
