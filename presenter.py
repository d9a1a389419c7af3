from quadratic import Outcome


def fmt(x):
    return f"{x:g}"


def describe(result):
    """One line of text for a solve result."""
    if result.outcome is Outcome.NO_ROOTS:
        return "The equation has no roots"
    if result.outcome is Outcome.ONE_ROOT:
        return f"The equation has 1 root: x = {fmt(result.roots[0])}"
    if result.outcome is Outcome.TWO_ROOTS:
        x1, x2 = result.roots
        return f"The equation has 2 roots: x1 = {fmt(x1)}, x2 = {fmt(x2)}"
    if result.outcome is Outcome.INFINITE_ROOTS:
        return "The equation has an infinite number of roots"
    return result.error.message


def exit_code(result):
    if result.ok:
        return 0
    return result.error.exit_code


def equation(a, b, c):
    return f"{fmt(a)} * x^2 + {fmt(b)} * x + {fmt(c)} = 0"
