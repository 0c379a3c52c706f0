"""Generate a sample dataset for trying out the workbench.

Run: python data/generate_sample.py
Creates: data/sample_series.xlsx
"""

import numpy as np
import pandas as pd
from pathlib import Path


def generate_sample_series(
    start_date: str = "2015-01-01",
    n_quarters: int = 32,  # 8 years
    base_level: float = 500,
    trend_slope: float = 6.0,
    seasonal_factors: tuple[float, ...] = (0.85, 1.1, 1.25, 0.8),
    noise_std: float = 15,
    seed: int = 42,
) -> pd.DataFrame:
    """Quarterly series with linear trend, multiplicative seasonality and noise.

    Also carries a score column with missing-value codes (99, -1) and a
    text column, so variable definitions and the runs test have something
    to work with.
    """
    rng = np.random.default_rng(seed)

    dates = pd.date_range(start=start_date, periods=n_quarters, freq="QS")
    t = np.arange(n_quarters)

    trend = base_level + trend_slope * t
    seasonal = np.array([seasonal_factors[i % len(seasonal_factors)] for i in t])
    noise = rng.normal(0, noise_std, n_quarters)
    sales = np.round(trend * seasonal + noise, 1)

    score = rng.integers(1, 8, n_quarters).astype(int)
    code_idx = rng.choice(n_quarters, size=4, replace=False)
    score[code_idx[:2]] = 99
    score[code_idx[2:]] = -1

    df = pd.DataFrame({
        "quarter": [f"{d.year}-Q{(d.month - 1) // 3 + 1}" for d in dates],
        "sales": sales,
        "score": score,
        "region": rng.choice(["North", "South", "East", "West"], n_quarters),
    })

    return df


if __name__ == "__main__":
    output_path = Path(__file__).parent / "sample_series.xlsx"
    df = generate_sample_series()
    df.to_excel(output_path, index=False, engine="openpyxl")
    print(f"Sample data generated: {output_path}")
    print(f"  Shape: {df.shape}")
    print(f"  Mean sales: {df['sales'].mean():.1f}")
    print(df.head())
