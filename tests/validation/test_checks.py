# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the FinApp semantic validation checks."""

import pytest

from finapp.model.entities import (
    Action,
    Api,
    Application,
    Component,
    Endpoint,
    FormField,
    Layout,
    LayoutType,
    Model,
    Navigation,
    NavigationType,
    NavItem,
    Screen,
)
from finapp.model.types import Parameter, Property, TypeRef
from finapp.validation.checks import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate,
)

# ###############
# Test Helpers
# ###############


def _prop(name: str, type_name: str = "string", **kwargs: object) -> Property:
    """Create a Property of the given type."""
    return Property(name=name, type=TypeRef(name=type_name), **kwargs)


def _model(name: str = "Account", *props: Property) -> Model:
    """Create a Model; defaults to a single ``id`` property."""
    return Model(name=name, properties=list(props) or [_prop("id")])


def _screen(name: str = "Home", initial: bool = False, layout: Layout | None = None) -> Screen:
    """Create a Screen with a stack layout unless another layout is given."""
    return Screen(name=name, title=name, is_initial=initial, layout=layout or Layout(type=LayoutType.STACK))


def _param(name: str, type_name: str = "string") -> Parameter:
    return Parameter(name=name, type=TypeRef(name=type_name), required=True)


def _endpoint(
    endpoint_id: str = "getAccounts", path: str = "/accounts", method: str = "GET", **kwargs: object
) -> Endpoint:
    return Endpoint(id=endpoint_id, path=path, method=method, **kwargs)


def _app(
    models: list[Model] | None = None,
    screens: list[Screen] | None = None,
    navigation: Navigation | None = None,
    api: Api | None = None,
) -> Application:
    """Create an Application; omitted sections get a valid default."""
    return Application(
        name="Demo",
        models=[_model()] if models is None else models,
        screens=[_screen(initial=True)] if screens is None else screens,
        navigation=Navigation(type=NavigationType.STACK, items=[NavItem(screen="Home")])
        if navigation is None
        else navigation,
        api=Api(base_url="https://api.example.com", endpoints=[_endpoint()]) if api is None else api,
    )


def _warnings(result: ValidationResult) -> list[str]:
    return [w.message for w in result.warnings]


def _errors(result: ValidationResult) -> list[str]:
    return [e.message for e in result.errors]


def _assert_clean(app: Application) -> None:
    result = validate(app)
    assert result.warnings == [], f"Expected no warnings but got: {_warnings(result)}"
    assert result.errors == [], f"Expected no errors but got: {_errors(result)}"


def _assert_warning(app: Application, fragment: str) -> None:
    msgs = _warnings(validate(app))
    assert any(fragment in m for m in msgs), f"Expected warning containing {fragment!r} but got: {msgs}"


def _assert_error(app: Application, fragment: str) -> None:
    msgs = _errors(validate(app))
    assert any(fragment in m for m in msgs), f"Expected error containing {fragment!r} but got: {msgs}"


def _count(app: Application, fragment: str) -> int:
    return sum(fragment in d.message for d in validate(app).diagnostics)


# ###############
# Result
# ###############


class TestValidationResult:
    def test_default_app_is_clean(self) -> None:
        _assert_clean(_app())

    def test_has_errors(self) -> None:
        assert validate(_app(screens=[_screen()])).has_errors is True
        assert validate(_app()).has_errors is False

    def test_diagnostics_combine_errors_and_warnings(self) -> None:
        result = validate(_app(models=[], screens=[_screen()]))
        assert len(result.diagnostics) == len(result.errors) + len(result.warnings)
        assert all(isinstance(d, (ValidationError, ValidationWarning)) for d in result.diagnostics)

    def test_severity(self) -> None:
        assert ValidationError("x").severity == "error"
        assert ValidationWarning("x").severity == "warning"

    def test_diagnostics_are_frozen(self) -> None:
        error = ValidationError("x")
        with pytest.raises(AttributeError):
            error.message = "y"  # type: ignore[misc]

    def test_validate_does_not_modify_application(self) -> None:
        app = _app(models=[_model("account", _prop("kind", enum_values=["a", "a"]))])
        before = app.model_copy(deep=True)
        validate(app)
        assert app == before


# ###############
# Sections
# ###############


class TestSections:
    def test_no_models_warns(self) -> None:
        _assert_warning(_app(models=[]), "No models defined. At least one model should be defined.")

    def test_no_screens_warns(self) -> None:
        app = _app(screens=[], navigation=Navigation(type=NavigationType.STACK, items=[]))
        _assert_warning(app, "No screens defined.")

    def test_no_navigation_warns(self) -> None:
        app = Application(name="Demo", models=[_model()], screens=[_screen(initial=True)], api=_app().api)
        _assert_warning(app, "No navigation defined.")

    def test_no_api_warns(self) -> None:
        app = Application(name="Demo", models=[_model()], screens=[_screen(initial=True)], navigation=_app().navigation)
        _assert_warning(app, "No API defined.")

    def test_empty_application_has_only_warnings(self) -> None:
        result = validate(Application(name="Empty"))
        assert result.errors == []
        assert len(result.warnings) == 4


# ###############
# Initial Screen
# ###############


class TestInitialScreen:
    def test_no_initial_screen_is_one_error(self) -> None:
        app = _app(screens=[_screen("A"), _screen("B")])
        result = validate(app)
        matching = [e for e in _errors(result) if "initial screen" in e]
        assert matching == ["No initial screen defined. One screen must be marked as initial."]

    def test_multiple_initial_screens_is_one_error(self) -> None:
        app = _app(screens=[_screen("Home", True), _screen("B", True), _screen("C", True)])
        result = validate(app)
        matching = [e for e in _errors(result) if "initial" in e]
        assert len(matching) == 1
        assert "Multiple initial screens defined" in matching[0]
        assert "Only one screen can be marked as initial." in matching[0]

    def test_exactly_one_initial_screen_is_clean(self) -> None:
        _assert_clean(_app(screens=[_screen("Home", True), _screen("Other")]))

    def test_no_screens_means_no_initial_error(self) -> None:
        navigation = Navigation(type=NavigationType.STACK, items=[NavItem(screen="X")])
        result = validate(_app(screens=[], navigation=navigation))
        assert not any("initial" in e for e in _errors(result))


# ###############
# Models
# ###############


class TestModels:
    def test_empty_model_is_exactly_one_error(self) -> None:
        app = _app(models=[Model(name="Empty")])
        result = validate(app)
        matching = [e for e in _errors(result) if "Empty" in e]
        assert matching == ["Model 'Empty' must have at least one property."]
        assert not any("Empty" in w for w in _warnings(result))

    def test_duplicate_model_names(self) -> None:
        _assert_error(_app(models=[_model("Account"), _model("Account")]), "Duplicate model name 'Account'")

    def test_model_name_not_pascal_case_warns(self) -> None:
        _assert_warning(_app(models=[_model("account")]), "should be PascalCase")

    def test_model_without_id_warns(self) -> None:
        _assert_warning(_app(models=[_model("Account", _prop("name"))]), "has no 'id' property")

    def test_duplicate_property_names(self) -> None:
        _assert_error(_app(models=[_model("Account", _prop("id"), _prop("id"))]), "Duplicate property 'id'")

    def test_unknown_data_type(self) -> None:
        app = _app(models=[_model("Account", _prop("id"), _prop("amount", "money"))])
        _assert_error(app, "Property 'Account.amount' has unknown data type 'money'")

    @pytest.mark.parametrize("type_name", ["string", "number", "decimal", "boolean", "date", "array", "object"])
    def test_known_data_types_are_clean(self, type_name: str) -> None:
        _assert_clean(_app(models=[_model("Account", _prop("id"), _prop("value", type_name))]))

    def test_required_with_default_warns(self) -> None:
        app = _app(models=[_model("Account", _prop("id"), _prop("currency", required=True, default_value="USD"))])
        _assert_warning(app, "is required and has a default value")


# ###############
# Enums
# ###############


class TestEnums:
    def test_enum_on_string_is_clean(self) -> None:
        app = _app(models=[_model("Account", _prop("id"), _prop("kind", enum_values=["checking", "savings"]))])
        _assert_clean(app)

    def test_enum_on_number_is_error(self) -> None:
        app = _app(models=[_model("Account", _prop("id"), _prop("level", "number", enum_values=["1", "2"]))])
        _assert_error(app, "enum values can only be used with string properties")

    def test_duplicate_enum_value_reported_once_per_value(self) -> None:
        prop = _prop("status", enum_values=["open", "closed", "open", "open"])
        app = _app(models=[_model("Ticket", _prop("id"), prop)])
        assert _count(app, "duplicate enum value 'open'") == 1
        assert _count(app, "duplicate enum value 'closed'") == 0

    def test_two_duplicated_values_yield_two_diagnostics(self) -> None:
        prop = _prop("status", enum_values=["a", "b", "a", "b"])
        app = _app(models=[_model("Ticket", _prop("id"), prop)])
        assert _count(app, "duplicate enum value") == 2

    def test_default_outside_enum_is_error(self) -> None:
        prop = _prop("kind", enum_values=["checking", "savings"], default_value="credit")
        _assert_error(_app(models=[_model("Account", _prop("id"), prop)]), "is not one of its enum values")

    def test_default_inside_enum_is_clean(self) -> None:
        prop = _prop("kind", enum_values=["checking", "savings"], default_value="savings")
        _assert_clean(_app(models=[_model("Account", _prop("id"), prop)]))


# ###############
# Screens
# ###############


class TestScreens:
    def test_duplicate_screen_names(self) -> None:
        _assert_error(_app(screens=[_screen("Home", True), _screen("Home")]), "Duplicate screen name 'Home'")

    def test_screen_without_layout(self) -> None:
        screen = Screen(name="Home", title="Home", is_initial=True)
        _assert_error(_app(screens=[screen]), "Screen 'Home' has no layout.")

    def test_duplicate_screen_parameter(self) -> None:
        screen = _screen("Home", True)
        screen.parameters = [_param("id"), _param("id")]
        _assert_error(_app(screens=[screen]), "Duplicate parameter 'id' in screen 'Home'")

    def test_unknown_parameter_type(self) -> None:
        screen = _screen("Home", True)
        screen.parameters = [_param("when", "datetime")]
        _assert_error(_app(screens=[screen]), "unknown data type 'datetime'")

    def test_form_without_fields(self) -> None:
        layout = Layout(type=LayoutType.FORM, submit_button="Save")
        _assert_error(_app(screens=[_screen("Home", True, layout)]), "must define at least one field")

    def test_form_without_submit_button_warns(self) -> None:
        layout = Layout(type=LayoutType.FORM, fields=[FormField(name="amount", type="number")])
        _assert_warning(_app(screens=[_screen("Home", True, layout)]), "has no submit button")

    def test_duplicate_form_fields(self) -> None:
        layout = Layout(
            type=LayoutType.FORM,
            fields=[FormField(name="amount", type="number"), FormField(name="amount", type="text")],
            submit_button="Save",
        )
        _assert_error(_app(screens=[_screen("Home", True, layout)]), "Duplicate form field 'amount'")

    def test_complete_form_is_clean(self) -> None:
        layout = Layout(type=LayoutType.FORM, fields=[FormField(name="amount", type="number")], submit_button="Save")
        _assert_clean(_app(screens=[_screen("Home", True, layout)]))

    def test_fields_on_non_form_layout_warn(self) -> None:
        layout = Layout(type=LayoutType.STACK, fields=[FormField(name="amount", type="number")])
        _assert_warning(_app(screens=[_screen("Home", True, layout)]), "fields are only used by form layouts")

    def test_tabs_with_one_component_warn(self) -> None:
        layout = Layout(type=LayoutType.TABS, components=[Component(type="list")])
        _assert_warning(_app(screens=[_screen("Home", True, layout)]), "at least two components")

    def test_navigate_to_undeclared_screen(self) -> None:
        layout = Layout(actions=[Action(event="onTap", navigate="Nowhere")])
        _assert_error(_app(screens=[_screen("Home", True, layout)]), "navigates to undeclared screen 'Nowhere'")

    def test_navigate_to_declared_screen_is_clean(self) -> None:
        layout = Layout(actions=[Action(event="onTap", navigate="Other")])
        _assert_clean(_app(screens=[_screen("Home", True, layout), _screen("Other")]))

    def test_api_action_to_undeclared_endpoint(self) -> None:
        layout = Layout(actions=[Action(event="onLoad", api="missing")])
        _assert_error(_app(screens=[_screen("Home", True, layout)]), "calls undeclared endpoint 'missing'")

    def test_api_action_to_declared_endpoint_is_clean(self) -> None:
        layout = Layout(actions=[Action(event="onLoad", api="getAccounts")])
        _assert_clean(_app(screens=[_screen("Home", True, layout)]))

    def test_nested_component_navigation_is_checked(self) -> None:
        component = Component(type="list", attributes={"actions": {"onTap": {"navigate": "Ghost"}}})
        layout = Layout(components=[component])
        _assert_error(_app(screens=[_screen("Home", True, layout)]), "Component 'list' of screen 'Home'")


# ###############
# Navigation
# ###############


class TestNavigation:
    def test_item_to_undeclared_screen(self) -> None:
        navigation = Navigation(type=NavigationType.TAB, items=[NavItem(screen="Ghost", title="Ghosts")])
        _assert_error(_app(navigation=navigation), "Navigation item 'Ghosts' references undeclared screen 'Ghost'")

    def test_no_items_warns(self) -> None:
        _assert_warning(_app(navigation=Navigation(type=NavigationType.DRAWER)), "Navigation defines no items.")

    def test_more_than_five_tabs_warns(self) -> None:
        screens = [_screen(f"S{i}", i == 0) for i in range(6)]
        navigation = Navigation(type=NavigationType.TAB, items=[NavItem(screen=s.name) for s in screens])
        _assert_warning(_app(screens=screens, navigation=navigation), "Tab navigation has 6 items")

    def test_five_tabs_is_clean(self) -> None:
        screens = [_screen(f"S{i}", i == 0) for i in range(5)]
        navigation = Navigation(type=NavigationType.TAB, items=[NavItem(screen=s.name) for s in screens])
        _assert_clean(_app(screens=screens, navigation=navigation))

    def test_many_drawer_items_are_clean(self) -> None:
        screens = [_screen(f"S{i}", i == 0) for i in range(8)]
        navigation = Navigation(type=NavigationType.DRAWER, items=[NavItem(screen=s.name) for s in screens])
        _assert_clean(_app(screens=screens, navigation=navigation))


# ###############
# API
# ###############


def _api(*endpoints: Endpoint) -> Api:
    return Api(base_url="https://api.example.com", endpoints=list(endpoints))


class TestApi:
    def test_no_endpoints_warns(self) -> None:
        _assert_warning(_app(api=_api()), "API defines no endpoints.")

    def test_duplicate_endpoint_ids(self) -> None:
        _assert_error(_app(api=_api(_endpoint("a"), _endpoint("a"))), "Duplicate endpoint id 'a'")

    def test_unsupported_method(self) -> None:
        _assert_error(_app(api=_api(_endpoint(method="PATCH"))), "unsupported HTTP method 'PATCH'")

    def test_path_parameter_not_defined(self) -> None:
        app = _app(api=_api(_endpoint("getAccount", "/accounts/{id}")))
        _assert_error(app, "Path parameter 'id' not defined")

    def test_path_parameter_reported_once_per_name(self) -> None:
        app = _app(api=_api(_endpoint("get", "/a/{id}/b/{id}")))
        assert _count(app, "Path parameter 'id' not defined") == 1

    def test_declared_path_parameter_is_clean(self) -> None:
        endpoint = _endpoint("getAccount", "/accounts/{id}", parameters=[_param("id")])
        _assert_clean(_app(api=_api(endpoint)))

    def test_post_without_body_warns(self) -> None:
        app = _app(api=_api(_endpoint("create", method="POST")))
        _assert_warning(app, "POST endpoint 'create' should declare a body")

    def test_get_with_body_warns(self) -> None:
        app = _app(api=_api(_endpoint(body="Account")))
        _assert_warning(app, "GET endpoint 'getAccounts' should not declare a body")

    def test_delete_without_path_parameter_warns(self) -> None:
        _assert_warning(_app(api=_api(_endpoint("purge", method="DELETE"))), "should identify its resource")

    def test_put_with_path_parameter_and_body_is_clean(self) -> None:
        endpoint = _endpoint("update", "/accounts/{id}", "PUT", parameters=[_param("id")], body="Account")
        _assert_clean(_app(api=_api(endpoint)))

    def test_body_references_undeclared_model(self) -> None:
        endpoint = _endpoint("create", method="POST", body="Ghost")
        _assert_error(_app(api=_api(endpoint)), "body references undeclared model 'Ghost'")

    def test_response_unknown_model_warns(self) -> None:
        endpoint = _endpoint(response=TypeRef(name="Ghost", is_array=True))
        _assert_warning(_app(api=_api(endpoint)), "response type 'Ghost' is not a declared model")

    @pytest.mark.parametrize("response", ["Account", "string", "boolean"])
    def test_response_model_or_primitive_is_clean(self, response: str) -> None:
        endpoint = _endpoint(response=TypeRef(name=response))
        _assert_clean(_app(api=_api(endpoint)))
