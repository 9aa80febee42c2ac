from datetime import date

from fx_bnr import FxBnr

print(FxBnr.__version__)  # 0.1.0

# Default usage: yearly archives from www.bnr.ro
fx = FxBnr()
result = fx.refresh()
print(result.loaded_years, result.failed_years, result.synthetic)

# Today's published rates
print(fx.latest())

# EUR and USD over the first quarter
fx.select_currencies(["EUR", "USD"])
fx.set_date_range(date(2025, 1, 1), date(2025, 3, 31))
view = fx.view()
for stats in view.statistics:
    print(stats.as_display())

# Table: newest first, only EUR rows
fx.search("eur")
fx.sort("date-desc")
for row in fx.view().table[:5]:
    print(row)

# Comparison against the first value of the window
fx.compare(["EUR", "USD", "GBP"])
for series in fx.view().comparison:
    print(series.currency, series.points[-1])

# Export the filtered rows to cursuri_valutare_<today>.csv
print(fx.export_csv("exports"))

# Through a mirror or reverse proxy of www.bnr.ro
proxied = FxBnr("https://example.org/api/bnr")
