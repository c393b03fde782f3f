"""
policy_simulator.reporting - terminal formatting and flat-file export.

Modules:
  formatters - ASCII terminal formatters for Typer CLI commands.
  export     - CSV / JSON / Parquet writers and report serialisation.
"""
