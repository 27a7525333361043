from wrapcount.render import render_contracts
from wrapcount.terms import show_formula
from wrapcount.theorems import counter_spec


def test_show_formula() -> None:
    ax = counter_spec().get_axiom("add_assoc")
    assert ax is not None
    assert show_formula(ax.formula) == (
        "∀ c, n, m : U32 • add(add(c, n), m) = add(c, wrapping_add(n, m))"
    )
    new_ensures = counter_spec().get_axiom("new_ensures")
    assert new_ensures is not None
    assert show_formula(new_ensures.formula) == "new() = 0"
    new_zero = counter_spec().get_axiom("new_zero")
    assert new_zero is not None
    assert show_formula(new_zero.formula) == "∀ c : U32 • add(c, new()) = c"


def test_render_contracts() -> None:
    text = render_contracts()
    assert text.startswith("# WrappingCounter\n")
    assert "| `add` | `U32 × U32 → U32` |" in text
    assert "| `new` | `→ U32` |" in text
    assert "⦃ True ⦄\n  subtract(c, n)\n⦃ result ⇒ result = wrapping_sub(c, n) ⦄" in text
    assert "| `increment_max` | `increment(4294967295) = 0` |" in text
    for ax in counter_spec().axioms:
        assert f"`{ax.label}`" in text
