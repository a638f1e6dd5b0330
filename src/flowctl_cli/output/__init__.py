"""Result writers for flowctl commands."""

from flowctl_cli.output.writers import JsonResultWriter, SimpleResultWriter, default_result_writers

__all__ = ["JsonResultWriter", "SimpleResultWriter", "default_result_writers"]
