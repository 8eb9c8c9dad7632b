"""Button capsule."""

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
    dependencies=["lucide-react:^0.300.0"],
    code="""
import React from 'react'
import { Loader2 } from 'lucide-react'

interface ButtonProps {
  text: string
  variant?: 'primary' | 'secondary' | 'outline' | 'ghost'
  size?: 'sm' | 'md' | 'lg'
  disabled?: boolean
  loading?: boolean
  fullWidth?: boolean
  icon?: React.ReactNode
  onPress: () => void
}

const variants = {
  primary: 'bg-primary text-white hover:bg-primary/90',
  secondary: 'bg-secondary text-white hover:bg-secondary/90',
  outline: 'border-2 border-primary text-primary hover:bg-primary/10',
  ghost: 'text-primary hover:bg-primary/10',
}

const sizes = {
  sm: 'px-3 py-1.5 text-sm gap-1.5',
  md: 'px-4 py-2 text-base gap-2',
  lg: 'px-6 py-3 text-lg gap-2.5',
}

export function Button({
  text,
  variant = 'primary',
  size = 'md',
  disabled = false,
  loading = false,
  fullWidth = false,
  icon,
  onPress,
}: ButtonProps) {
  return (
    <button
      type="button"
      onClick={onPress}
      disabled={disabled || loading}
      className={`inline-flex items-center justify-center font-medium rounded transition-colors disabled:opacity-50 ${variants[variant]} ${sizes[size]} ${fullWidth ? 'w-full' : ''}`}
    >
      {loading ? <Loader2 className="animate-spin h-4 w-4" /> : icon}
      {text}
    </button>
  )
}
""",
)

_IOS = PlatformImplementation(
    framework="swiftui",
    min_version="15.0",
    code="""
import SwiftUI

struct ButtonView: View {
    let text: String
    var variant: String = "primary"
    var size: String = "md"
    var disabled: Bool = false
    var loading: Bool = false
    var fullWidth: Bool = false
    var icon: String? = nil
    let onPress: () -> Void

    private var verticalPadding: CGFloat {
        switch size {
        case "sm": return 6
        case "lg": return 14
        default: return 10
        }
    }

    var body: some View {
        Button(action: onPress) {
            HStack(spacing: 8) {
                if loading {
                    ProgressView()
                } else if let icon {
                    Image(systemName: icon)
                }
                Text(text).fontWeight(.medium)
            }
            .padding(.vertical, verticalPadding)
            .padding(.horizontal, verticalPadding * 1.6)
            .frame(maxWidth: fullWidth ? .infinity : nil)
            .foregroundStyle(variant == "primary" || variant == "secondary" ? Color.white : Color.brandPrimary)
            .background(background)
            .clipShape(RoundedRectangle(cornerRadius: Theme.cornerRadius))
        }
        .disabled(disabled || loading)
        .opacity(disabled ? 0.5 : 1)
    }

    @ViewBuilder
    private var background: some View {
        switch variant {
        case "secondary": Color.brandSecondary
        case "outline": RoundedRectangle(cornerRadius: Theme.cornerRadius).stroke(Color.brandPrimary, lineWidth: 2)
        case "ghost": Color.clear
        default: Color.brandPrimary
        }
    }
}
""",
)

_ANDROID = PlatformImplementation(
    framework="compose",
    dependencies=["androidx.compose.material:material-icons-extended"],
    code="""
import androidx.compose.foundation.layout.fillMaxWidth
import androidx.compose.foundation.layout.padding
import androidx.compose.foundation.layout.size
import androidx.compose.material3.Button
import androidx.compose.material3.ButtonDefaults
import androidx.compose.material3.CircularProgressIndicator
import androidx.compose.material3.OutlinedButton
import androidx.compose.material3.Text
import androidx.compose.material3.TextButton
import androidx.compose.runtime.Composable
import androidx.compose.ui.Modifier
import androidx.compose.ui.unit.dp

@Composable
fun ButtonCapsule(
    text: String,
    variant: String = "primary",
    size: String = "md",
    disabled: Boolean = false,
    loading: Boolean = false,
    fullWidth: Boolean = false,
    icon: String? = null,
    onPress: () -> Unit,
) {
    val modifier = if (fullWidth) Modifier.fillMaxWidth() else Modifier
    val label: @Composable () -> Unit = {
        if (loading) {
            CircularProgressIndicator(modifier = Modifier.size(16.dp), strokeWidth = 2.dp)
        } else {
            Text(text, modifier = Modifier.padding(horizontal = if (size == "lg") 8.dp else 0.dp))
        }
    }
    when (variant) {
        "outline" -> OutlinedButton(onClick = onPress, enabled = !disabled, modifier = modifier) { label() }
        "ghost" -> TextButton(onClick = onPress, enabled = !disabled, modifier = modifier) { label() }
        "secondary" -> Button(
            onClick = onPress,
            enabled = !disabled,
            modifier = modifier,
            colors = ButtonDefaults.buttonColors(containerColor = androidx.compose.material3.MaterialTheme.colorScheme.secondary),
        ) { label() }
        else -> Button(onClick = onPress, enabled = !disabled, modifier = modifier) { label() }
    }
}
""",
)

BUTTON = CapsuleDefinition(
    id="button",
    name="Button",
    description="Interactive button with variants, sizes and a loading state",
    category=CapsuleCategory.UI,
    tags=["interactive", "form", "action", "cta"],
    props=[
        PropDefinition(name="text", type=PropType.STRING, required=True, description="Button label"),
        PropDefinition(
            name="variant",
            type=PropType.SELECT,
            default="primary",
            options=["primary", "secondary", "outline", "ghost"],
            description="Visual style",
        ),
        PropDefinition(
            name="size", type=PropType.SELECT, default="md", options=["sm", "md", "lg"], description="Button size"
        ),
        PropDefinition(name="disabled", type=PropType.BOOLEAN, default=False, description="Disabled state"),
        PropDefinition(name="loading", type=PropType.BOOLEAN, default=False, description="Show a spinner"),
        PropDefinition(name="fullWidth", type=PropType.BOOLEAN, default=False, description="Fill the available width"),
        PropDefinition(name="icon", type=PropType.ICON, description="SF Symbol / Material icon name"),
        PropDefinition(name="onPress", type=PropType.ACTION, required=True, description="Tap handler"),
    ],
    platforms={
        TargetPlatform.WEB: _WEB,
        TargetPlatform.DESKTOP: _WEB,
        TargetPlatform.IOS: _IOS,
        TargetPlatform.ANDROID: _ANDROID,
    },
)
