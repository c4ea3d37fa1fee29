"""Komendy CLI oereb: każdy moduł udostępnia add_parser(subparsers) i run(args)."""
