"""Modal dialog capsule."""

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
import React, { useEffect } from 'react'
import { X } from 'lucide-react'

interface ModalProps {
  title?: string
  isOpen?: boolean
  onClose?: () => void
  footer?: React.ReactNode
  children?: React.ReactNode
}

export function Modal({ title, isOpen = false, onClose, footer, children }: ModalProps) {
  useEffect(() => {
    if (!isOpen) return
    const onKey = (event: KeyboardEvent) => event.key === 'Escape' && onClose?.()
    window.addEventListener('keydown', onKey)
    return () => window.removeEventListener('keydown', onKey)
  }, [isOpen, onClose])

  if (!isOpen) return null

  return (
    <div className="fixed inset-0 z-50 flex items-center justify-center bg-black/40" onClick={onClose}>
      <div
        role="dialog"
        aria-modal="true"
        className="w-full max-w-lg bg-surface rounded shadow-xl"
        onClick={(event) => event.stopPropagation()}
      >
        <header className="flex items-center justify-between px-5 py-4 border-b border-gray-200">
          {title && <h2 className="text-lg font-semibold font-heading">{title}</h2>}
          <button onClick={onClose} aria-label="Close" className="p-1 rounded hover:bg-gray-100">
            <X className="w-4 h-4" />
          </button>
        </header>
        <div className="px-5 py-4 space-y-3">{children}</div>
        {footer && <footer className="flex justify-end gap-2 px-5 py-4 border-t border-gray-200">{footer}</footer>}
      </div>
    </div>
  )
}
""",
)

_IOS = PlatformImplementation(
    framework="swiftui",
    min_version="16.0",
    code="""
import SwiftUI

struct ModalView<Content: View>: View {
    var title: String? = nil
    var isOpen: Bool = false
    var onClose: () -> Void = {}
    @ViewBuilder var content: () -> Content

    @State private var presented = false

    var body: some View {
        Color.clear
            .frame(height: 0)
            .onAppear { presented = isOpen }
            .onChange(of: isOpen) { newValue in presented = newValue }
            .sheet(isPresented: $presented, onDismiss: onClose) {
                NavigationStack {
                    VStack(alignment: .leading, spacing: 12) {
                        content()
                        Spacer()
                    }
                    .padding()
                    .navigationTitle(title ?? "")
                    .navigationBarTitleDisplayMode(.inline)
                    .toolbar {
                        ToolbarItem(placement: .cancellationAction) {
                            Button("Close") { presented = false }
                        }
                    }
                }
                .presentationDetents([.medium, .large])
            }
    }
}

extension ModalView where Content == EmptyView {
    init(title: String? = nil, isOpen: Bool = false, onClose: @escaping () -> Void = {}) {
        self.init(title: title, isOpen: isOpen, onClose: onClose) { EmptyView() }
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
import androidx.compose.material3.AlertDialog
import androidx.compose.material3.Text
import androidx.compose.material3.TextButton
import androidx.compose.runtime.Composable
import androidx.compose.ui.unit.dp

@Composable
fun ModalCapsule(
    title: String? = null,
    isOpen: Boolean = false,
    onClose: () -> Unit = {},
    content: @Composable ColumnScope.() -> Unit = {},
) {
    if (!isOpen) return
    AlertDialog(
        onDismissRequest = onClose,
        title = if (title != null) { { Text(title) } } else null,
        text = { Column(verticalArrangement = Arrangement.spacedBy(12.dp), content = content) },
        confirmButton = { TextButton(onClick = onClose) { Text("Close") } },
    )
}
""",
)

MODAL = CapsuleDefinition(
    id="modal",
    name="Modal",
    description="Dialog presented over the current screen",
    category=CapsuleCategory.FEEDBACK,
    tags=["overlay", "dialog", "feedback"],
    accepts_children=True,
    slots=["footer"],
    props=[
        PropDefinition(name="title", type=PropType.STRING),
        PropDefinition(name="isOpen", type=PropType.BOOLEAN, default=False),
        PropDefinition(name="onClose", type=PropType.ACTION),
    ],
    platforms={
        TargetPlatform.WEB: _WEB,
        TargetPlatform.DESKTOP: _WEB,
        TargetPlatform.IOS: _IOS,
        TargetPlatform.ANDROID: _ANDROID,
    },
)
