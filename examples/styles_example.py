#!/usr/bin/env python3
"""
Example demonstrating style presets, configuration files and safe_parse.

The same options are parsed with Windows-style ("/out:file") and
PowerShell-style ("-out file") arguments, and `safe_parse` is used to get an
Ok/Err result instead of inspecting errors by hand.
"""

from result import Err, Ok

from simplecmd import SimpleCmdParser

OPTIONS = [
    {"names": ["verbose", "v"]},
    {"names": ["out", "o"], "requires_value": True},
]


if __name__ == "__main__":
    windows = SimpleCmdParser(options=OPTIONS, style="windows")
    powershell = SimpleCmdParser(options=OPTIONS, style="powershell")

    for parser, args in [
        (windows, ["/verbose", "/out:report.txt", "data.csv"]),
        (powershell, ["-verbose", "-out", "report.txt", "data.csv"]),
        (windows, ["/verbose:yes", "/unknown"]),
    ]:
        print(f"{args}:")
        outcome = parser.safe_parse(args)
        if isinstance(outcome, Ok):
            results = outcome.ok_value
            print(f"  out: {results['out']}")
            print(f"  verbose: {results['verbose']}")
            print(f"  input: {results['@1']}")
        elif isinstance(outcome, Err):
            print(f"  error: {outcome.err_value}")

    # A parser can also be built from a YAML or JSON file:
    # parser = SimpleCmdParser.from_config_file("parser.yaml")
