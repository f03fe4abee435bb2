# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Kotlin/Jetpack Compose emitter for the Android platform."""

from __future__ import annotations

from finapp.emitters.base import render, start_screen
from finapp.model.entities import Application, Layout

# ###############
# Public Interface
# ###############


def android_package(app: Application) -> str:
    """Return the Kotlin package name derived from the application name."""
    return f"com.{app.name.lower()}"


def emit_android(app: Application) -> dict[str, str]:
    """Render the Android sources of *app* as a mapping of relative path to text."""
    package = android_package(app)
    root = "app/src/main/java/" + package.replace(".", "/")
    files: dict[str, str] = {}
    for model in app.models:
        files[f"{root}/models/{model.name}.kt"] = render(_MODEL_TEMPLATE, package=package, model=model)
    for screen in app.screens:
        files[f"{root}/ui/screens/{screen.name}Screen.kt"] = render(
            _SCREEN_TEMPLATE, package=package, screen=screen, layout=screen.layout or Layout()
        )
    if app.api is not None:
        files[f"{root}/network/ApiClient.kt"] = render(_API_TEMPLATE, package=package, api=app.api)
    files[f"{root}/{app.name}Application.kt"] = render(
        _APP_TEMPLATE, package=package, app=app, start=start_screen(app)
    )
    return files


# ################
# Implementation
# ################

_MODEL_TEMPLATE = """\
package {{ package }}.models

import com.google.gson.annotations.SerializedName

// Generated by FinApp - do not modify manually
data class {{ model.name }}(
{% for prop in model.properties %}
{% if prop.enum_values %}
    /** One of: {{ prop.enum_values | join(', ') }} */
{% endif %}
    @SerializedName("{{ prop.name }}")
    val {{ prop.name }}: {{ prop.type | kotlin_type }}{{ '' if prop.required else '? = null' }}{{ '' if loop.last else ',' }}
{% endfor %}
)
"""

_SCREEN_TEMPLATE = """\
package {{ package }}.ui.screens

import androidx.compose.foundation.layout.*
import androidx.compose.material3.*
import androidx.compose.runtime.*
import androidx.compose.ui.Modifier
import androidx.compose.ui.unit.dp

// Generated by FinApp - do not modify manually
@Composable
fun {{ screen.name }}Screen(onNavigate: (String) -> Unit = {}) {
{% for field in layout.fields %}
    var {{ field.name }} by remember { mutableStateOf("") }
{% endfor %}
    Column(
        modifier = Modifier
            .fillMaxSize()
            .padding(16.dp)
    ) {
        Text(
            text = {{ screen.title | json }},
            style = MaterialTheme.typography.headlineMedium
        )
{% for component in layout.components %}
        // {{ component.type }}
{% endfor %}
{% for field in layout.fields %}
        OutlinedTextField(
            value = {{ field.name }},
            onValueChange = { {{ field.name }} = it },
            label = { Text({{ (field.label or field.name) | json }}) },
            modifier = Modifier.fillMaxWidth()
        )
{% endfor %}
{% for action in layout.actions if action.navigate %}
        // {{ action.event }} navigates to {{ action.navigate }}
{% endfor %}
{% if layout.submit_button %}
        Button(onClick = {}) { Text({{ layout.submit_button | json }}) }
{% endif %}
{% if layout.cancel_button %}
        TextButton(onClick = {}) { Text({{ layout.cancel_button | json }}) }
{% endif %}
    }
}
"""

_API_TEMPLATE = """\
package {{ package }}.network

import okhttp3.RequestBody
import okhttp3.ResponseBody
import retrofit2.Retrofit
import retrofit2.converter.gson.GsonConverterFactory
import retrofit2.http.*

// Generated by FinApp - do not modify manually
interface ApiService {
{% for endpoint in api.endpoints %}
    @{{ endpoint.method }}("{{ endpoint.path.lstrip('/') }}")
    suspend fun {{ endpoint.id }}({% for name in endpoint.path_parameters() %}@Path("{{ name }}") {{ name }}: String{{ ', ' if not loop.last or endpoint.body else '' }}{% endfor %}{% if endpoint.body %}@Body body: RequestBody{% endif %}): ResponseBody
{% endfor %}
}

object ApiClient {
    const val BASE_URL = {{ (api.base_url.rstrip('/') ~ '/') | json }}
    const val USE_MOCK_DATA = {{ 'true' if api.mock else 'false' }}

    val service: ApiService by lazy {
        Retrofit.Builder()
            .baseUrl(BASE_URL)
            .addConverterFactory(GsonConverterFactory.create())
            .build()
            .create(ApiService::class.java)
    }
}
"""

_APP_TEMPLATE = """\
package {{ package }}

import android.app.Application
import androidx.compose.runtime.Composable
import androidx.navigation.compose.NavHost
import androidx.navigation.compose.composable
import androidx.navigation.compose.rememberNavController
{% for screen in app.screens %}
import {{ package }}.ui.screens.{{ screen.name }}Screen
{% endfor %}

// Generated by FinApp - do not modify manually
class {{ app.name }}Application : Application()

@Composable
fun {{ app.name }}App() {
    val navController = rememberNavController()

    NavHost(navController = navController, startDestination = "{{ start.name | lower if start else '' }}") {
{% for screen in app.screens %}
        composable("{{ screen.name | lower }}") {
            {{ screen.name }}Screen(onNavigate = { navController.navigate(it) })
        }
{% endfor %}
    }
}
"""
