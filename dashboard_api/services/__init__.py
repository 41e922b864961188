"""
Data services behind the dashboard API.

- ``snapshots``: CCTV snapshot listing merged with the collector's sidecar.
- ``layers``: allow-listed layer datasets read from ``DB_DATA_DIR``.
- ``bundled``: layer datasets shipped inside the package.
"""
