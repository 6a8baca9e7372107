from __future__ import annotations

from typezero.inference import infer_schema
from typezero.signatures import RenderContext, capitalize, signature_of, singularize, type_name


def test_signature_ignores_property_order() -> None:
    a = infer_schema({"street": "x", "city": "y", "geo": {"lat": 1.0, "lng": 2.0}})
    b = infer_schema({"geo": {"lng": 3.0, "lat": 4.0}, "city": "z", "street": "w"})
    assert signature_of(a) == signature_of(b)


def test_signature_distinguishes_nested_shapes() -> None:
    a = infer_schema({"geo": {"lat": 1}})
    b = infer_schema({"geo": {"lat": "1"}})
    assert signature_of(a) != signature_of(b)


def test_signature_includes_array_items() -> None:
    assert signature_of(infer_schema({"a": [1]})) != signature_of(infer_schema({"a": ["x"]}))


def test_signature_ignores_requiredness() -> None:
    merged = infer_schema([{"a": 1, "b": 2}, {"a": 1}]).items
    single = infer_schema({"a": 1, "b": 2})
    assert signature_of(merged) == signature_of(single)


def test_signature_integer_distinction_is_opt_in() -> None:
    a = infer_schema({"n": 1})
    b = infer_schema({"n": 1.5})
    assert signature_of(a) == signature_of(b)
    assert signature_of(a, distinguish_integers=True) != signature_of(b, distinguish_integers=True)


def test_naming_helpers() -> None:
    assert capitalize("meta") == "Meta"
    assert capitalize("") == ""
    assert singularize("users") == "user"
    assert singularize("data") == "dataItem"
    assert singularize("s") == "sItem"
    assert type_name("meta") == "Meta"
    assert type_name("shipping-address") == "ShippingAddress"
    assert type_name("2fa") == "T2fa"
    assert type_name("---") == "Item"


def test_render_context_reuses_first_name_and_suffixes_clashes() -> None:
    ctx = RenderContext()
    address = infer_schema({"street": "a"})
    other = infer_schema({"zip": 1})

    assert ctx.lookup(address) is None
    assert ctx.claim(address, "billing") == "Billing"
    assert ctx.lookup(infer_schema({"street": "b"})) == "Billing"

    assert ctx.claim(other, "billing") == "Billing2"
    ctx.reserve("Root")
    assert ctx.claim(infer_schema({"q": True}), "root") == "Root2"
