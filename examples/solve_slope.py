"""Example: solve for the BK slope and trace how the budget affects the result."""

from trisolve import construct, format_construction, format_real, solve, SolveOptions


def main() -> None:
    solution = solve()
    print("Status:", solution.status)
    print("Iterations:", solution.iterations)
    print("Slope:", format_real(solution.slope))
    print("Alpha:", format_real(solution.alpha))
    print(format_construction(construct(solution.slope)))

    for budget in (5, 20, 40):
        partial = solve(SolveOptions(max_iterations=budget))
        print(f"budget={budget}: slope={format_real(partial.slope)} error={format_real(partial.error)}")


if __name__ == "__main__":
    main()
