"""
Custom Markdown extensions for BlogWare.
Adds [[slug]] cross-post linking and <figure> wrapping for stand-alone images.
"""

from urllib.parse import quote
from xml.etree.ElementTree import Element

import markdown
from loguru import logger
from markdown.extensions import Extension
from markdown.inlinepatterns import InlineProcessor
from markdown.treeprocessors import Treeprocessor

from ..config import POST_URL_PREFIX
from .sanitizer import sanitize_html


class PostLinkProcessor(InlineProcessor):
    """Process [[slug]] and [[slug|Label]] syntax and convert to post links."""

    def __init__(self, pattern, md, url_prefix=POST_URL_PREFIX):
        super().__init__(pattern, md)
        self.url_prefix = url_prefix.rstrip("/")

    def handleMatch(self, m, data):
        full_match = m.group(1).strip()

        if "|" in full_match:
            target, label = (part.strip() for part in full_match.split("|", 1))
        else:
            target = label = full_match

        if not target:
            return None, None, None

        link = Element("a")
        link.set("href", f"{self.url_prefix}/{quote(target, safe='')}")
        link.text = label or target
        logger.debug(f"Post link processed: {full_match} -> {link.get('href')}")
        return link, m.start(0), m.end(0)


class PostLinkExtension(Extension):
    """Markdown extension to support [[slug]] links between posts."""

    def __init__(self, **kwargs):
        self.config = {"url_prefix": [POST_URL_PREFIX, "Path prefix for post links"]}
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        pattern = r"\[\[([^\]]+?)\]\]"
        # Run before the standard link patterns so [[...]] is not read as a reference
        md.inlinePatterns.register(
            PostLinkProcessor(pattern, md, self.getConfig("url_prefix")),
            "post_link",
            175,
        )


class ImageFigureProcessor(Treeprocessor):
    """Convert stand-alone images into <figure> structures with optional captions."""

    def run(self, root):
        for parent in root.iter():
            children = list(parent)
            for index, child in enumerate(children):
                if child.tag != "p":
                    continue
                if (child.text or "").strip():
                    continue
                element_children = list(child)
                if len(element_children) != 1:
                    continue
                image = element_children[0]
                if image.tag != "img" or (image.tail or "").strip():
                    continue
                figure = Element("figure")
                figure.set("class", "post-image")
                image.tail = ""
                figure.append(image)
                caption_text = (image.get("title") or "").strip()
                if "title" in image.attrib:
                    image.attrib.pop("title")
                if caption_text:
                    figcaption = Element("figcaption")
                    figcaption.text = caption_text
                    figure.append(figcaption)
                figure.tail = child.tail
                parent.insert(index, figure)
                parent.remove(child)


class ImageFigureExtension(Extension):
    """Register the image figure processor for Markdown conversion."""

    def extendMarkdown(self, md):
        md.treeprocessors.register(ImageFigureProcessor(md), "post_image_figure", 15)


def render_markdown(text: str, sanitize: bool = True) -> str:
    """Render a post body to HTML. A fresh Markdown instance is used per call."""
    md = markdown.Markdown(
        extensions=["extra", PostLinkExtension(), ImageFigureExtension()]
    )
    html = md.convert(text)
    if sanitize:
        html = sanitize_html(html)
    return html
