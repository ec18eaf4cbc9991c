from __future__ import annotations

import math

import numpy as np

from brailleplot import Bars, Chart, Continuous, PixelColor, Points, Steps, histogram_shape


def render_demo() -> list[tuple[str, str]]:
    out: list[tuple[str, str]] = []

    chart = Chart.default().lineplot(Continuous(lambda x: math.sin(x) / x))
    out.append(("y = sin(x) / x", chart.to_string()))

    chart = (
        Chart(180, 60, -5.0, 5.0)
        .linecolorplot(Continuous(math.cos), PixelColor.BRIGHT_RED)
        .linecolorplot(Continuous(lambda x: math.sin(x) / 2.0), PixelColor.BRIGHT_BLUE)
    )
    out.append(("y = cos(x), y = sin(x) / 2", chart.to_string()))

    samples = [(float(x), float(x % 4)) for x in range(12)]
    out.append(("steps", Chart(120, 40, 0.0, 11.0).lineplot(Steps(samples)).to_string()))
    out.append(("bars", Chart(120, 40, 0.0, 11.0).lineplot(Bars(samples)).to_string()))

    rng = np.random.default_rng(3)
    shape, lo, hi = histogram_shape(rng.normal(size=2000), 20)
    out.append(("histogram of N(0, 1)", Chart(160, 48, lo, hi).lineplot(shape).to_string()))

    points = [(x, x * x) for x in np.linspace(-3.0, 3.0, 25).tolist()]
    out.append(("points", Chart(120, 48, -3.0, 3.0).lineplot(Points(points)).to_string()))
    return out


def main() -> None:
    for title, text in render_demo():
        print(title)
        print(text)


if __name__ == "__main__":
    main()
