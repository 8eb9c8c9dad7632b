"""Text input capsule."""

from ...core.ir import (
    CapsuleCategory,
    CapsuleDefinition,
    PlatformImplementation,
    PropDefinition,
    PropType,
    TargetPlatform,
)

_WEB = PlatformImplementation(
    framework="react",
    code="""
import React, { useState } from 'react'

interface InputProps {
  label?: string
  placeholder?: string
  type?: 'text' | 'email' | 'password' | 'number'
  required?: boolean
  onChange?: (value: string) => void
}

export function Input({ label, placeholder, type = 'text', required = false, onChange }: InputProps) {
  const [value, setValue] = useState('')

  return (
    <label className="flex flex-col gap-1">
      {label && (
        <span className="text-sm font-medium">
          {label}
          {required && <span className="text-error"> *</span>}
        </span>
      )}
      <input
        type={type}
        value={value}
        placeholder={placeholder}
        required={required}
        onChange={(event) => {
          setValue(event.target.value)
          onChange?.(event.target.value)
        }}
        className="px-3 py-2 border border-gray-300 rounded focus:outline-none focus:ring-2 focus:ring-primary"
      />
    </label>
  )
}
""",
)

_IOS = PlatformImplementation(
    framework="swiftui",
    code="""
import SwiftUI

struct InputView: View {
    var label: String? = nil
    var placeholder: String = ""
    var type: String = "text"
    var required: Bool = false
    var onChange: () -> Void = {}

    @State private var value = ""

    var body: some View {
        VStack(alignment: .leading, spacing: 4) {
            if let label {
                Text(required ? "\\(label) *" : label)
                    .font(.subheadline.weight(.medium))
            }
            Group {
                if type == "password" {
                    SecureField(placeholder, text: $value)
                } else {
                    TextField(placeholder, text: $value)
                        .keyboardType(type == "email" ? .emailAddress : type == "number" ? .decimalPad : .default)
                        .textInputAutocapitalization(type == "email" ? .never : .sentences)
                }
            }
            .textFieldStyle(.roundedBorder)
            .onChange(of: value) { _ in onChange() }
        }
    }
}
""",
)

_ANDROID = PlatformImplementation(
    framework="compose",
    code="""
import androidx.compose.foundation.layout.fillMaxWidth
import androidx.compose.foundation.text.KeyboardOptions
import androidx.compose.material3.OutlinedTextField
import androidx.compose.material3.Text
import androidx.compose.runtime.Composable
import androidx.compose.runtime.getValue
import androidx.compose.runtime.mutableStateOf
import androidx.compose.runtime.remember
import androidx.compose.runtime.setValue
import androidx.compose.ui.Modifier
import androidx.compose.ui.text.input.KeyboardType
import androidx.compose.ui.text.input.PasswordVisualTransformation
import androidx.compose.ui.text.input.VisualTransformation

@Composable
fun InputCapsule(
    label: String? = null,
    placeholder: String = "",
    type: String = "text",
    required: Boolean = false,
    onChange: (String) -> Unit = {},
) {
    var value by remember { mutableStateOf("") }
    OutlinedTextField(
        value = value,
        onValueChange = {
            value = it
            onChange(it)
        },
        label = label?.let { { Text(if (required) "$it *" else it) } },
        placeholder = { Text(placeholder) },
        singleLine = true,
        visualTransformation = if (type == "password") PasswordVisualTransformation() else VisualTransformation.None,
        keyboardOptions = KeyboardOptions(
            keyboardType = when (type) {
                "email" -> KeyboardType.Email
                "number" -> KeyboardType.Number
                "password" -> KeyboardType.Password
                else -> KeyboardType.Text
            }
        ),
        modifier = Modifier.fillMaxWidth(),
    )
}
""",
)

INPUT = CapsuleDefinition(
    id="input",
    name="Input",
    description="Single-line text field with label",
    category=CapsuleCategory.FORMS,
    tags=["form", "interactive", "text"],
    props=[
        PropDefinition(name="label", type=PropType.STRING, description="Field label"),
        PropDefinition(name="placeholder", type=PropType.STRING, default=""),
        PropDefinition(
            name="type",
            type=PropType.SELECT,
            default="text",
            options=["text", "email", "password", "number"],
        ),
        PropDefinition(name="required", type=PropType.BOOLEAN, default=False),
        PropDefinition(name="onChange", type=PropType.ACTION, description="Called with the new value"),
    ],
    platforms={
        TargetPlatform.WEB: _WEB,
        TargetPlatform.DESKTOP: _WEB,
        TargetPlatform.IOS: _IOS,
        TargetPlatform.ANDROID: _ANDROID,
    },
)
