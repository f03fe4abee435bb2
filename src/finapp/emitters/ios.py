# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""SwiftUI emitter for the iOS platform."""

from __future__ import annotations

from finapp.emitters.base import render, start_screen
from finapp.model.entities import Application, Layout, LayoutType

# ###############
# Public Interface
# ###############


def emit_ios(app: Application) -> dict[str, str]:
    """Render the iOS sources of *app* as a mapping of relative path to text."""
    files: dict[str, str] = {}
    for model in app.models:
        files[f"Models/{model.name}.swift"] = render(_MODEL_TEMPLATE, model=model)
    for screen in app.screens:
        layout = screen.layout or Layout()
        files[f"Screens/{screen.name}View.swift"] = render(
            _SCREEN_TEMPLATE,
            screen=screen,
            layout=layout,
            scrolls=layout.type == LayoutType.SCROLL,
        )
    if app.api is not None:
        files["Networking/APIClient.swift"] = render(_API_TEMPLATE, api=app.api)
    files[f"App/{app.name}App.swift"] = render(_APP_TEMPLATE, app=app, start=start_screen(app))
    return files


# ################
# Implementation
# ################

_MODEL_TEMPLATE = """\
import Foundation

// Generated by FinApp - do not modify manually
struct {{ model.name }}: Codable {
{% for prop in model.properties %}
{% if prop.enum_values %}
    /// One of: {{ prop.enum_values | join(', ') }}
{% endif %}
    let {{ prop.name }}: {{ prop.type | swift_type }}{{ '' if prop.required else '?' }}
{% endfor %}
}
"""

_SCREEN_TEMPLATE = """\
import SwiftUI

// Generated by FinApp - do not modify manually
struct {{ screen.name }}View: View {
{% for field in layout.fields %}
    @State private var {{ field.name }} = ""
{% endfor %}

    var body: some View {
{% if layout.fields %}
        Form {
{% elif scrolls %}
        ScrollView {
{% else %}
        VStack {
{% endif %}
            Text({{ screen.title | json }})
                .font(.title)
                .padding()
{% for component in layout.components %}
            // {{ component.type }}
{% endfor %}
{% for field in layout.fields %}
{% if field.type == 'password' %}
            SecureField({{ (field.label or field.name) | json }}, text: ${{ field.name }})
{% else %}
            TextField({{ (field.label or field.name) | json }}, text: ${{ field.name }})
{% endif %}
{% endfor %}
{% if layout.submit_button %}
            Button({{ layout.submit_button | json }}) {}
{% endif %}
{% if layout.cancel_button %}
            Button({{ layout.cancel_button | json }}, role: .cancel) {}
{% endif %}
        }
        .navigationTitle({{ screen.title | json }})
    }
}

#Preview {
    {{ screen.name }}View()
}
"""

_API_TEMPLATE = """\
import Foundation

// Generated by FinApp - do not modify manually
final class APIClient {
    static let shared = APIClient()
    private let baseURL = URL(string: {{ api.base_url | json }})!
    private let session = URLSession.shared

    private init() {}

    private func request(_ path: String, method: String, body: Data? = nil) async throws -> Data {
        var request = URLRequest(url: baseURL.appendingPathComponent(path))
        request.httpMethod = method
        request.setValue("application/json", forHTTPHeaderField: "Content-Type")
        request.httpBody = body
        let (data, _) = try await session.data(for: request)
        return data
    }
{% for endpoint in api.endpoints %}

    /// {{ endpoint.method }} {{ endpoint.path }}
    func {{ endpoint.id }}({% for name in endpoint.path_parameters() %}{{ name }}: String, {% endfor %}body: Data? = nil) async throws -> Data {
        try await request("{{ endpoint.path | swift_path }}", method: "{{ endpoint.method }}", body: body)
    }
{% endfor %}
}
"""

_APP_TEMPLATE = """\
import SwiftUI

// Generated by FinApp - do not modify manually
@main
struct {{ app.name }}App: App {
    var body: some Scene {
        WindowGroup {
            NavigationStack {
{% if start %}
                {{ start.name }}View()
{% else %}
                Text({{ (app.display_name or app.name) | json }})
{% endif %}
            }
        }
    }
}
"""
