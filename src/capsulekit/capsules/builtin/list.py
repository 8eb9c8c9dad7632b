"""List capsule."""

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

interface ListProps {
  items?: string[]
  dividers?: boolean
  onItemPress?: (index: number) => void
  children?: React.ReactNode
}

export function List({ items = [], dividers = true, onItemPress, children }: ListProps) {
  return (
    <ul className={`bg-surface rounded ${dividers ? 'divide-y divide-gray-200' : ''}`}>
      {items.map((item, index) => (
        <li
          key={index}
          onClick={() => onItemPress?.(index)}
          className="px-4 py-3 cursor-pointer hover:bg-primary/5"
        >
          {item}
        </li>
      ))}
      {React.Children.map(children, (child) => (
        <li className="px-4 py-3">{child}</li>
      ))}
    </ul>
  )
}
""",
)

_IOS = PlatformImplementation(
    framework="swiftui",
    code="""
import SwiftUI

struct ListView<Content: View>: View {
    var items: [String] = []
    var dividers: Bool = true
    var onItemPress: () -> Void = {}
    @ViewBuilder var content: () -> Content

    var body: some View {
        VStack(alignment: .leading, spacing: 0) {
            ForEach(Array(items.enumerated()), id: \\.offset) { index, item in
                Button(action: onItemPress) {
                    Text(item)
                        .frame(maxWidth: .infinity, alignment: .leading)
                        .padding(.vertical, 12)
                }
                .buttonStyle(.plain)
                if dividers && index < items.count - 1 {
                    Divider()
                }
            }
            content()
        }
        .padding(.horizontal)
        .background(Color.brandSurface)
        .clipShape(RoundedRectangle(cornerRadius: Theme.cornerRadius))
    }
}

extension ListView where Content == EmptyView {
    init(items: [String] = [], dividers: Bool = true, onItemPress: @escaping () -> Void = {}) {
        self.init(items: items, dividers: dividers, onItemPress: onItemPress) { EmptyView() }
    }
}
""",
)

_ANDROID = PlatformImplementation(
    framework="compose",
    code="""
import androidx.compose.foundation.clickable
import androidx.compose.foundation.layout.Column
import androidx.compose.foundation.layout.ColumnScope
import androidx.compose.foundation.layout.fillMaxWidth
import androidx.compose.foundation.layout.padding
import androidx.compose.material3.HorizontalDivider
import androidx.compose.material3.Text
import androidx.compose.runtime.Composable
import androidx.compose.ui.Modifier
import androidx.compose.ui.unit.dp

@Composable
fun ListCapsule(
    items: List<String> = emptyList(),
    dividers: Boolean = true,
    onItemPress: (Int) -> Unit = {},
    content: @Composable ColumnScope.() -> Unit = {},
) {
    Column(modifier = Modifier.fillMaxWidth()) {
        items.forEachIndexed { index, item ->
            Text(
                text = item,
                modifier = Modifier
                    .fillMaxWidth()
                    .clickable { onItemPress(index) }
                    .padding(horizontal = 16.dp, vertical = 12.dp),
            )
            if (dividers && index < items.lastIndex) {
                HorizontalDivider()
            }
        }
        content()
    }
}
""",
)

LIST = CapsuleDefinition(
    id="list",
    name="List",
    description="Vertical list of rows",
    category=CapsuleCategory.DATA,
    tags=["data", "collection", "layout"],
    accepts_children=True,
    props=[
        PropDefinition(name="items", type=PropType.ARRAY, default=[], description="Row labels"),
        PropDefinition(name="dividers", type=PropType.BOOLEAN, default=True),
        PropDefinition(name="onItemPress", type=PropType.ACTION),
    ],
    platforms={
        TargetPlatform.WEB: _WEB,
        TargetPlatform.DESKTOP: _WEB,
        TargetPlatform.IOS: _IOS,
        TargetPlatform.ANDROID: _ANDROID,
    },
)
