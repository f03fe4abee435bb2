# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""High-level tests demonstrating how to construct the FinApp application model."""

from finapp.model import (
    DATA_TYPE_NAMES,
    Action,
    Api,
    Application,
    DataType,
    Endpoint,
    Layout,
    LayoutType,
    Model,
    Navigation,
    NavigationType,
    NavItem,
    ParsedDocument,
    Platform,
    Property,
    Screen,
    TypeRef,
)


def test_type_ref_primitive() -> None:
    """A TypeRef with a known name maps to a DataType."""
    ref = TypeRef(name="decimal")
    assert ref.data_type == DataType.DECIMAL
    assert str(ref) == "decimal"


def test_type_ref_array() -> None:
    """Array type refs render with a [] suffix."""
    ref = TypeRef(name="string", is_array=True)
    assert ref.data_type == DataType.STRING
    assert str(ref) == "string[]"


def test_type_ref_unknown_name_is_kept() -> None:
    """Unknown type names survive so that validation can report them."""
    ref = TypeRef(name="money")
    assert ref.data_type is None
    assert ref.name == "money"


def test_data_type_names() -> None:
    """Every DataType value is a known type name."""
    assert DATA_TYPE_NAMES == {"string", "number", "decimal", "boolean", "date", "array", "object"}


def test_property_defaults() -> None:
    """A property is optional, without default or enum values, unless stated."""
    prop = Property(name="balance", type=TypeRef(name="decimal"))
    assert prop.required is False
    assert prop.default_value is None
    assert prop.enum_values == []


def test_model_get_property() -> None:
    """Properties can be looked up by name."""
    model = Model(name="Account", properties=[Property(name="id", type=TypeRef(name="string"), required=True)])
    prop = model.get_property("id")
    assert prop is not None
    assert prop.required is True
    assert model.get_property("missing") is None


def test_layout_defaults_to_stack() -> None:
    """A layout without an explicit type is a stack."""
    layout = Layout()
    assert layout.type == LayoutType.STACK
    assert layout.components == []
    assert layout.fields == []
    assert layout.actions == []


def test_screen_with_actions() -> None:
    """A screen layout carries event actions."""
    screen = Screen(
        name="Home",
        title="Home",
        is_initial=True,
        layout=Layout(actions=[Action(event="onLoad", api="getAccounts")]),
    )
    assert screen.layout is not None
    assert screen.layout.actions[0].api == "getAccounts"
    assert screen.layout.actions[0].navigate is None


def test_endpoint_path_parameters() -> None:
    """Path placeholders are returned in order, including repeats."""
    endpoint = Endpoint(id="get", path="/accounts/{accountId}/tx/{ id }/{accountId}", method="GET")
    assert endpoint.path_parameters() == ["accountId", "id", "accountId"]


def test_endpoint_without_path_parameters() -> None:
    """A path without placeholders has no parameters."""
    assert Endpoint(id="list", path="/accounts", method="GET").path_parameters() == []


def test_endpoint_unterminated_placeholder() -> None:
    """An unterminated placeholder is ignored."""
    assert Endpoint(id="bad", path="/accounts/{id", method="GET").path_parameters() == []


def test_application_lookups() -> None:
    """The application resolves models, screens and its initial screen."""
    app = Application(
        name="Demo",
        platforms=[Platform.WEB],
        models=[Model(name="Account")],
        screens=[Screen(name="List", title="List"), Screen(name="Home", title="Home", is_initial=True)],
        navigation=Navigation(type=NavigationType.TAB, items=[NavItem(screen="Home")]),
        api=Api(base_url="https://api.example.com"),
    )
    assert app.get_model("Account") is not None
    assert app.get_model("Missing") is None
    assert app.get_screen("List") is not None
    assert app.initial_screen is not None
    assert app.initial_screen.name == "Home"


def test_application_without_initial_screen() -> None:
    """initial_screen is None when no screen is marked initial."""
    assert Application(name="Demo", screens=[Screen(name="A", title="A")]).initial_screen is None


def test_parsed_document_is_empty_by_default() -> None:
    """An empty grammar tree has no header and no sections."""
    doc = ParsedDocument()
    assert doc.header is None
    assert doc.models == []
    assert doc.screens == []
    assert doc.navigation is None
    assert doc.api is None
    assert doc.mock_data is None
