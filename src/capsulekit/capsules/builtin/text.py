"""Text capsule."""

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
import React from 'react'

interface TextProps {
  content: string
  variant?: 'h1' | 'h2' | 'h3' | 'body' | 'caption'
  color?: string
  align?: 'left' | 'center' | 'right'
  bold?: boolean
}

const styles = {
  h1: 'text-4xl font-bold font-heading',
  h2: 'text-3xl font-semibold font-heading',
  h3: 'text-2xl font-semibold font-heading',
  body: 'text-base',
  caption: 'text-sm text-[var(--color-text-secondary)]',
}

export function Text({ content, variant = 'body', color, align = 'left', bold = false }: TextProps) {
  const Tag = variant.startsWith('h') ? (variant as 'h1' | 'h2' | 'h3') : 'p'
  return (
    <Tag className={`${styles[variant]} text-${align} ${bold ? 'font-bold' : ''}`} style={color ? { color } : undefined}>
      {content}
    </Tag>
  )
}
""",
)

_IOS = PlatformImplementation(
    framework="swiftui",
    code="""
import SwiftUI

struct TextView: View {
    let content: String
    var variant: String = "body"
    var color: String? = nil
    var align: String = "left"
    var bold: Bool = false

    private var font: Font {
        switch variant {
        case "h1": return .largeTitle
        case "h2": return .title
        case "h3": return .title2
        case "caption": return .caption
        default: return .body
        }
    }

    private var alignment: TextAlignment {
        switch align {
        case "center": return .center
        case "right": return .trailing
        default: return .leading
        }
    }

    var body: some View {
        Text(content)
            .font(font)
            .fontWeight(bold ? .bold : nil)
            .multilineTextAlignment(alignment)
            .foregroundStyle(variant == "caption" ? Color.brandTextSecondary : Color.brandTextPrimary)
    }
}
""",
)

_ANDROID = PlatformImplementation(
    framework="compose",
    code="""
import androidx.compose.material3.MaterialTheme
import androidx.compose.material3.Text
import androidx.compose.runtime.Composable
import androidx.compose.ui.text.font.FontWeight
import androidx.compose.ui.text.style.TextAlign

@Composable
fun TextCapsule(
    content: String,
    variant: String = "body",
    color: String? = null,
    align: String = "left",
    bold: Boolean = false,
) {
    val style = when (variant) {
        "h1" -> MaterialTheme.typography.displaySmall
        "h2" -> MaterialTheme.typography.headlineMedium
        "h3" -> MaterialTheme.typography.titleLarge
        "caption" -> MaterialTheme.typography.bodySmall
        else -> MaterialTheme.typography.bodyLarge
    }
    Text(
        text = content,
        style = style,
        fontWeight = if (bold) FontWeight.Bold else null,
        textAlign = when (align) {
            "center" -> TextAlign.Center
            "right" -> TextAlign.End
            else -> TextAlign.Start
        },
    )
}
""",
)

TEXT = CapsuleDefinition(
    id="text",
    name="Text",
    description="Headings, body copy and captions",
    category=CapsuleCategory.UI,
    tags=["typography", "content"],
    props=[
        PropDefinition(name="content", type=PropType.STRING, required=True, description="Text to display"),
        PropDefinition(
            name="variant",
            type=PropType.SELECT,
            default="body",
            options=["h1", "h2", "h3", "body", "caption"],
            description="Typographic style",
        ),
        PropDefinition(name="color", type=PropType.COLOR, description="Override color"),
        PropDefinition(
            name="align", type=PropType.SELECT, default="left", options=["left", "center", "right"]
        ),
        PropDefinition(name="bold", type=PropType.BOOLEAN, default=False),
    ],
    platforms={
        TargetPlatform.WEB: _WEB,
        TargetPlatform.DESKTOP: _WEB,
        TargetPlatform.IOS: _IOS,
        TargetPlatform.ANDROID: _ANDROID,
    },
)
