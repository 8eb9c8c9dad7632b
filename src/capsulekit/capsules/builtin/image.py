"""Image capsule."""

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

interface ImageProps {
  src: string
  alt?: string
  width?: number
  height?: number
  fit?: 'cover' | 'contain' | 'fill'
  rounded?: boolean
}

const fits = { cover: 'object-cover', contain: 'object-contain', fill: 'object-fill' }

export function Image({ src, alt = '', width, height, fit = 'cover', rounded = false }: ImageProps) {
  return (
    <img
      src={src}
      alt={alt}
      width={width}
      height={height}
      loading="lazy"
      className={`${fits[fit]} ${rounded ? 'rounded' : ''} ${width ? '' : 'w-full'}`}
    />
  )
}
""",
)

_IOS = PlatformImplementation(
    framework="swiftui",
    min_version="15.0",
    code="""
import SwiftUI

struct ImageView: View {
    let src: String
    var alt: String = ""
    var width: CGFloat? = nil
    var height: CGFloat? = nil
    var fit: String = "cover"
    var rounded: Bool = false

    var body: some View {
        AsyncImage(url: URL(string: src)) { phase in
            switch phase {
            case .success(let image):
                if fit == "fill" {
                    image.resizable()
                } else {
                    image.resizable().aspectRatio(contentMode: fit == "contain" ? .fit : .fill)
                }
            case .failure:
                Image(systemName: "photo").foregroundStyle(.secondary)
            default:
                ProgressView()
            }
        }
        .frame(width: width, height: height)
        .clipShape(RoundedRectangle(cornerRadius: rounded ? Theme.cornerRadius : 0))
        .accessibilityLabel(alt)
    }
}
""",
)

_ANDROID = PlatformImplementation(
    framework="compose",
    dependencies=["io.coil-kt:coil-compose:2.5.0"],
    code="""
import androidx.compose.foundation.layout.fillMaxWidth
import androidx.compose.foundation.layout.height
import androidx.compose.foundation.layout.width
import androidx.compose.foundation.shape.RoundedCornerShape
import androidx.compose.runtime.Composable
import androidx.compose.ui.Modifier
import androidx.compose.ui.draw.clip
import androidx.compose.ui.layout.ContentScale
import androidx.compose.ui.unit.dp
import coil.compose.AsyncImage

@Composable
fun ImageCapsule(
    src: String,
    alt: String = "",
    width: Int? = null,
    height: Int? = null,
    fit: String = "cover",
    rounded: Boolean = false,
) {
    var modifier: Modifier = if (width != null) Modifier.width(width.dp) else Modifier.fillMaxWidth()
    if (height != null) modifier = modifier.height(height.dp)
    if (rounded) modifier = modifier.clip(RoundedCornerShape(8.dp))
    AsyncImage(
        model = src,
        contentDescription = alt,
        modifier = modifier,
        contentScale = when (fit) {
            "contain" -> ContentScale.Fit
            "fill" -> ContentScale.FillBounds
            else -> ContentScale.Crop
        },
    )
}
""",
)

IMAGE = CapsuleDefinition(
    id="image",
    name="Image",
    description="Remote or bundled image",
    category=CapsuleCategory.MEDIA,
    tags=["media", "image", "content"],
    props=[
        PropDefinition(name="src", type=PropType.IMAGE, required=True, description="Image URL"),
        PropDefinition(name="alt", type=PropType.STRING, default=""),
        PropDefinition(name="width", type=PropType.NUMBER),
        PropDefinition(name="height", type=PropType.NUMBER),
        PropDefinition(name="fit", type=PropType.SELECT, default="cover", options=["cover", "contain", "fill"]),
        PropDefinition(name="rounded", type=PropType.BOOLEAN, default=False),
    ],
    platforms={
        TargetPlatform.WEB: _WEB,
        TargetPlatform.DESKTOP: _WEB,
        TargetPlatform.IOS: _IOS,
        TargetPlatform.ANDROID: _ANDROID,
    },
)
