"""Metadata, author and link extraction."""

from typing import Optional

from gpx_parser.models import Author, AuthorEmail, Link, Metadata
from .fields import read_direct_child, read_scalar
from .tree import XmlNode


def default_link() -> Link:
    return Link(href="", text="", type="")


def default_author() -> Author:
    return Author(name="", email=AuthorEmail(id="", domain=""), link=default_link())


def default_metadata() -> Metadata:
    return Metadata(name="", desc="", time="", author=default_author(), link=default_link())


def parse_link(link: Optional[XmlNode]) -> Link:
    """Build a Link from a ``link`` element, or the default link if absent."""
    if link is None:
        return default_link()
    return Link(
        href=link.get("href") or "",
        text=read_scalar(link, "text"),
        type=read_scalar(link, "type"),
    )


def parse_email(email: Optional[XmlNode]) -> AuthorEmail:
    if email is None:
        return AuthorEmail(id="", domain="")
    return AuthorEmail(id=email.get("id") or "", domain=email.get("domain") or "")


def parse_author(author: Optional[XmlNode]) -> Author:
    if author is None:
        return default_author()
    return Author(
        name=read_scalar(author, "name"),
        email=parse_email(author.find("email")),
        link=parse_link(author.find("link")),
    )


def parse_metadata(metadata: Optional[XmlNode]) -> Metadata:
    """Build Metadata from a ``metadata`` element.

    The metadata link is looked up with direct-child preference because the
    author block carries its own ``link``.
    """
    if metadata is None:
        return default_metadata()
    return Metadata(
        name=read_scalar(metadata, "name"),
        desc=read_scalar(metadata, "desc"),
        time=read_scalar(metadata, "time"),
        author=parse_author(metadata.find("author")),
        link=parse_link(read_direct_child(metadata, "link")),
    )
