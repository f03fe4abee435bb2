# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the web, iOS and Android code emitters."""

import logging
from pathlib import Path

import pytest

from finapp.emitters import EmitterError, android_package, emit, emit_android, emit_ios, emit_web, write_outputs
from finapp.emitters.base import referenced_models, render, start_screen
from finapp.model.entities import (
    Action,
    Api,
    Application,
    Endpoint,
    FormField,
    Layout,
    LayoutType,
    Model,
    Platform,
    Screen,
)
from finapp.model.types import Parameter, Property, TypeRef

# ###############
# Test Helpers
# ###############


def _prop(name: str, type_name: str = "string", **kwargs: object) -> Property:
    return Property(name=name, type=TypeRef(name=type_name), **kwargs)


def _app(with_api: bool = True) -> Application:
    """Build a small application touching every emitter branch."""
    home = Screen(
        name="Home",
        title="Home",
        is_initial=True,
        layout=Layout(
            type=LayoutType.FORM,
            fields=[FormField(name="amount", type="number", required=True), FormField(name="note", type="text")],
            actions=[Action(event="onSubmit", navigate="Detail", api="createTransaction")],
            submit_button="Save",
        ),
    )
    detail = Screen(name="Detail", title="Account Detail", layout=Layout(type=LayoutType.SCROLL))
    api = Api(
        base_url="https://api.example.com/v1",
        endpoints=[
            Endpoint(
                id="getAccount",
                path="/accounts/{id}",
                method="GET",
                parameters=[Parameter(name="id", type=TypeRef(name="string"), required=True)],
                response=TypeRef(name="Account"),
            ),
            Endpoint(
                id="createTransaction",
                path="/transactions",
                method="POST",
                body="Transaction",
                response=TypeRef(name="Transaction"),
            ),
        ],
    )
    return Application(
        name="Demo",
        display_name="Demo App",
        version="1.0.0",
        platforms=[Platform.WEB, Platform.IOS, Platform.ANDROID],
        models=[
            Model(
                name="Account",
                properties=[
                    _prop("id", required=True),
                    _prop("kind", enum_values=["checking", "savings"]),
                    _prop("balance", "decimal"),
                ],
            ),
            Model(name="Transaction", properties=[_prop("id", required=True), _prop("amount", "decimal")]),
        ],
        screens=[home, detail],
        api=api if with_api else None,
    )


# ###############
# Shared Helpers
# ###############


class TestBase:
    def test_render_uses_filters(self) -> None:
        assert render("{{ path | ts_path }}", path="/a/{id}") == "/a/${id}"
        assert render("{{ path | swift_path }}", path="/a/{id}") == "/a/\\(id)"
        assert render("{{ name | lower_first }}", name="Account") == "account"

    def test_render_undefined_variable(self) -> None:
        with pytest.raises(EmitterError, match="Template rendering failed"):
            render("{{ missing }}")

    def test_render_syntax_error(self) -> None:
        with pytest.raises(EmitterError, match="Template rendering failed"):
            render("{% if %}")

    def test_start_screen_prefers_initial(self) -> None:
        start = start_screen(_app())
        assert start is not None
        assert start.name == "Home"

    def test_start_screen_falls_back_to_first(self) -> None:
        app = Application(name="Demo", screens=[Screen(name="A", title="A"), Screen(name="B", title="B")])
        start = start_screen(app)
        assert start is not None
        assert start.name == "A"

    def test_start_screen_none(self) -> None:
        assert start_screen(Application(name="Demo")) is None

    def test_referenced_models(self) -> None:
        app = _app()
        assert app.api is not None
        assert referenced_models(app, app.api.endpoints) == ["Account", "Transaction"]

    def test_write_outputs(self, tmp_path: Path) -> None:
        written = write_outputs({"src/models/A.ts": "a", "README": "b"}, tmp_path)
        assert written == [tmp_path / "src" / "models" / "A.ts", tmp_path / "README"]
        assert (tmp_path / "src" / "models" / "A.ts").read_text(encoding="utf-8") == "a"


# ###############
# Web
# ###############


class TestWeb:
    def test_file_set(self) -> None:
        assert sorted(emit_web(_app())) == [
            "src/App.tsx",
            "src/api/client.ts",
            "src/models/Account.ts",
            "src/models/Transaction.ts",
            "src/models/index.ts",
            "src/screens/DetailScreen.tsx",
            "src/screens/HomeScreen.tsx",
        ]

    def test_no_api_no_client(self) -> None:
        assert "src/api/client.ts" not in emit_web(_app(with_api=False))

    def test_model_interface(self) -> None:
        text = emit_web(_app())["src/models/Account.ts"]
        assert "export interface Account {" in text
        assert "  id: string;" in text
        assert '  kind?: "checking" | "savings";' in text
        assert "  balance?: number;" in text
        assert '  kind: "checking",' in text
        assert "  balance: 0," in text

    def test_model_index(self) -> None:
        text = emit_web(_app())["src/models/index.ts"]
        assert "export type { Account } from './Account';" in text
        assert "export { emptyTransaction } from './Transaction';" in text

    def test_form_screen(self) -> None:
        text = emit_web(_app())["src/screens/HomeScreen.tsx"]
        assert "import { useNavigate } from 'react-router-dom';" in text
        assert "navigate('/detail');" in text
        assert "// calls endpoint createTransaction" in text
        assert 'name="amount"' in text
        assert 'type="number"' in text
        assert '<Button type="submit" variant="contained">Save</Button>' in text

    def test_screen_without_navigation(self) -> None:
        text = emit_web(_app())["src/screens/DetailScreen.tsx"]
        assert "useNavigate" not in text
        assert "Account Detail" in text

    def test_api_client(self) -> None:
        text = emit_web(_app())["src/api/client.ts"]
        assert 'export const API_BASE_URL = "https://api.example.com/v1";' in text
        assert "import type { Account, Transaction } from '../models';" in text
        assert (
            "export async function getAccount(id: string, query?: Record<string, unknown>): Promise<Account>"
        ) in text
        assert "url: `/accounts/${id}`," in text
        assert "export async function createTransaction(body: Transaction): Promise<Transaction>" in text
        assert "data: body," in text

    def test_app_routes(self) -> None:
        text = emit_web(_app())["src/App.tsx"]
        assert '<Route path="/home" element={<HomeScreen />} />' in text
        assert '<Navigate to="/home" />' in text
        assert "Demo App 1.0.0" in text

    def test_app_without_screens_has_no_redirect(self) -> None:
        text = emit_web(Application(name="Empty"))["src/App.tsx"]
        assert "Navigate to" not in text


# ###############
# iOS
# ###############


class TestIos:
    def test_file_set(self) -> None:
        assert sorted(emit_ios(_app())) == [
            "App/DemoApp.swift",
            "Models/Account.swift",
            "Models/Transaction.swift",
            "Networking/APIClient.swift",
            "Screens/DetailView.swift",
            "Screens/HomeView.swift",
        ]

    def test_model_struct(self) -> None:
        text = emit_ios(_app())["Models/Account.swift"]
        assert "struct Account: Codable {" in text
        assert "    let id: String\n" in text
        assert "    let kind: String?" in text
        assert "    /// One of: checking, savings" in text
        assert "    let balance: Decimal?" in text

    def test_form_view(self) -> None:
        text = emit_ios(_app())["Screens/HomeView.swift"]
        assert "Form {" in text
        assert '@State private var amount = ""' in text
        assert 'TextField("amount", text: $amount)' in text
        assert 'Button("Save") {}' in text

    def test_scroll_view(self) -> None:
        text = emit_ios(_app())["Screens/DetailView.swift"]
        assert "ScrollView {" in text
        assert 'Text("Account Detail")' in text

    def test_api_client(self) -> None:
        text = emit_ios(_app())["Networking/APIClient.swift"]
        assert 'URL(string: "https://api.example.com/v1")!' in text
        assert "func getAccount(id: String, body: Data? = nil) async throws -> Data {" in text
        assert 'request("/accounts/\\(id)", method: "GET", body: body)' in text

    def test_app_entry(self) -> None:
        text = emit_ios(_app())["App/DemoApp.swift"]
        assert "struct DemoApp: App {" in text
        assert "HomeView()" in text


# ###############
# Android
# ###############


class TestAndroid:
    _ROOT = "app/src/main/java/com/demo"

    def test_package(self) -> None:
        assert android_package(Application(name="FinanceTracker")) == "com.financetracker"

    def test_file_set(self) -> None:
        assert sorted(emit_android(_app())) == [
            f"{self._ROOT}/DemoApplication.kt",
            f"{self._ROOT}/models/Account.kt",
            f"{self._ROOT}/models/Transaction.kt",
            f"{self._ROOT}/network/ApiClient.kt",
            f"{self._ROOT}/ui/screens/DetailScreen.kt",
            f"{self._ROOT}/ui/screens/HomeScreen.kt",
        ]

    def test_data_class(self) -> None:
        text = emit_android(_app())[f"{self._ROOT}/models/Account.kt"]
        assert "package com.demo.models" in text
        assert "data class Account(" in text
        assert "    val id: String,\n" in text
        assert "    val kind: String? = null,\n" in text
        assert "    val balance: Double? = null\n" in text

    def test_screen(self) -> None:
        text = emit_android(_app())[f"{self._ROOT}/ui/screens/HomeScreen.kt"]
        assert "fun HomeScreen(onNavigate: (String) -> Unit = {}) {" in text
        assert 'var amount by remember { mutableStateOf("") }' in text
        assert "// onSubmit navigates to Detail" in text

    def test_api_service(self) -> None:
        text = emit_android(_app())[f"{self._ROOT}/network/ApiClient.kt"]
        assert 'const val BASE_URL = "https://api.example.com/v1/"' in text
        assert '@GET("accounts/{id}")' in text
        assert 'suspend fun getAccount(@Path("id") id: String): ResponseBody' in text
        assert "suspend fun createTransaction(@Body body: RequestBody): ResponseBody" in text

    def test_application_start_destination(self) -> None:
        text = emit_android(_app())[f"{self._ROOT}/DemoApplication.kt"]
        assert 'startDestination = "home"' in text
        assert "import com.demo.ui.screens.DetailScreen" in text


# ###############
# Dispatch
# ###############


class TestEmit:
    @pytest.mark.parametrize("platform", ["web", Platform.WEB])
    def test_platform_by_name_or_enum(self, platform: Platform | str) -> None:
        assert emit(_app(), platform) == emit_web(_app())

    def test_ios_and_android(self) -> None:
        assert emit(_app(), "ios") == emit_ios(_app())
        assert emit(_app(), Platform.ANDROID) == emit_android(_app())

    def test_unknown_platform(self) -> None:
        with pytest.raises(EmitterError, match=r"Unknown platform 'windows' \(expected one of: web, ios, android\)"):
            emit(_app(), "windows")

    def test_logs_generation(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="finapp.emitters.generate"):
            emit(_app(), "web")
        assert "Generating web code for Demo" in caplog.text
