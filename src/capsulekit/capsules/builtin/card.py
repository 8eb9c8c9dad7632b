"""Card container capsule."""

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

interface CardProps {
  title?: string
  subtitle?: string
  elevated?: boolean
  padding?: 'sm' | 'md' | 'lg'
  children?: React.ReactNode
}

const paddings = { sm: 'p-3', md: 'p-5', lg: 'p-8' }

export function Card({ title, subtitle, elevated = true, padding = 'md', children }: CardProps) {
  return (
    <section
      className={`bg-surface rounded border border-gray-200 ${elevated ? 'shadow-md' : ''} ${paddings[padding]}`}
    >
      {title && <h3 className="text-lg font-semibold font-heading">{title}</h3>}
      {subtitle && <p className="text-sm text-[var(--color-text-secondary)]">{subtitle}</p>}
      {children && <div className={title || subtitle ? 'mt-4 space-y-3' : 'space-y-3'}>{children}</div>}
    </section>
  )
}
""",
)

_IOS = PlatformImplementation(
    framework="swiftui",
    code="""
import SwiftUI

struct CardView<Content: View>: View {
    var title: String? = nil
    var subtitle: String? = nil
    var elevated: Bool = true
    var padding: String = "md"
    @ViewBuilder var content: () -> Content

    private var inset: CGFloat {
        switch padding {
        case "sm": return 12
        case "lg": return 32
        default: return 20
        }
    }

    var body: some View {
        VStack(alignment: .leading, spacing: 12) {
            if let title {
                Text(title).font(.headline)
            }
            if let subtitle {
                Text(subtitle).font(.subheadline).foregroundStyle(Color.brandTextSecondary)
            }
            content()
        }
        .padding(inset)
        .frame(maxWidth: .infinity, alignment: .leading)
        .background(Color.brandSurface)
        .clipShape(RoundedRectangle(cornerRadius: Theme.cornerRadius))
        .shadow(color: .black.opacity(elevated && Theme.showsShadows ? 0.1 : 0), radius: 6, y: 2)
    }
}

extension CardView where Content == EmptyView {
    init(title: String? = nil, subtitle: String? = nil, elevated: Bool = true, padding: String = "md") {
        self.init(title: title, subtitle: subtitle, elevated: elevated, padding: padding) { EmptyView() }
    }
}
""",
)

_ANDROID = PlatformImplementation(
    framework="compose",
    code="""
import androidx.compose.foundation.layout.Arrangement
import androidx.compose.foundation.layout.Column
import androidx.compose.foundation.layout.ColumnScope
import androidx.compose.foundation.layout.fillMaxWidth
import androidx.compose.foundation.layout.padding
import androidx.compose.material3.Card
import androidx.compose.material3.CardDefaults
import androidx.compose.material3.MaterialTheme
import androidx.compose.material3.Text
import androidx.compose.runtime.Composable
import androidx.compose.ui.Modifier
import androidx.compose.ui.unit.dp

@Composable
fun CardCapsule(
    title: String? = null,
    subtitle: String? = null,
    elevated: Boolean = true,
    padding: String = "md",
    content: @Composable ColumnScope.() -> Unit = {},
) {
    val inset = when (padding) {
        "sm" -> 12.dp
        "lg" -> 32.dp
        else -> 20.dp
    }
    Card(
        modifier = Modifier.fillMaxWidth(),
        elevation = CardDefaults.cardElevation(defaultElevation = if (elevated) 4.dp else 0.dp),
    ) {
        Column(modifier = Modifier.padding(inset), verticalArrangement = Arrangement.spacedBy(12.dp)) {
            title?.let { Text(it, style = MaterialTheme.typography.titleMedium) }
            subtitle?.let { Text(it, style = MaterialTheme.typography.bodyMedium) }
            content()
        }
    }
}
""",
)

CARD = CapsuleDefinition(
    id="card",
    name="Card",
    description="Surface that groups related content",
    category=CapsuleCategory.LAYOUT,
    tags=["container", "layout", "content"],
    accepts_children=True,
    props=[
        PropDefinition(name="title", type=PropType.STRING),
        PropDefinition(name="subtitle", type=PropType.STRING),
        PropDefinition(name="elevated", type=PropType.BOOLEAN, default=True, description="Draw a shadow"),
        PropDefinition(name="padding", type=PropType.SELECT, default="md", options=["sm", "md", "lg"]),
    ],
    platforms={
        TargetPlatform.WEB: _WEB,
        TargetPlatform.DESKTOP: _WEB,
        TargetPlatform.IOS: _IOS,
        TargetPlatform.ANDROID: _ANDROID,
    },
)
