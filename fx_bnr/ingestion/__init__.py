"""Download, parse and export BNR exchange-rate documents."""
