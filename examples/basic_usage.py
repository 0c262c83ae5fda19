"""Basic Differentia usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from differentia import (
    MethodType,
    analyze_smoothing,
    build_forward,
    characterize_noise,
    compare_results,
    evaluate,
    evaluate_many,
    validate_points,
)


def demonstrate_tables() -> None:
    # Validate raw samples, then print the forward difference table.
    points = [(3, 27), (0, 0), (2, 8), (1, 1), (4, 64)]
    prepared = validate_points(points)
    print("Sorted x:", prepared.x_values, "h =", prepared.step_size)

    for row in build_forward(prepared.sorted_points):
        print("  ".join(f"{cell:>12}" for cell in row))


def demonstrate_single_formula() -> None:
    # One formula with its full derivation.
    points = [(0, 1), (1, 2), (2, 4), (3, 8)]
    result = evaluate(MethodType.EVERETT, points, 1.5)
    for step in result.steps:
        if step.table is None:
            print(step.description)
    print(f"{result.method_name}: {result.value}")


def demonstrate_comparison() -> None:
    # All seven formulas at the same query, plus a noise check on the data.
    points = [(x / 2, x * x / 4 + 0.01 * (-1) ** x) for x in range(7)]
    results = evaluate_many(None, points, 1.3, record_steps=False)
    for result in results:
        print(f"{result.method_name:>20}: {result.value:.6f}  {result.warning or ''}")

    summary = compare_results(results)
    print(f"mean={summary.mean:.6f} spread={summary.spread:.2e} closest={summary.closest_to_mean.value}")

    report = characterize_noise(points)
    print("Noise level:", report.overall_level.value, "-", report.recommendation)

    for metrics in analyze_smoothing(points, ["forward", "everett"]):
        print(f"{metrics.method_name:>20}: reduction={metrics.variance_reduction_percent:.2f}% "
              f"max_dev={metrics.max_deviation:.4f} ({metrics.smoothing_level.value} smoothing)")


if __name__ == "__main__":
    demonstrate_tables()
    demonstrate_single_formula()
    demonstrate_comparison()
