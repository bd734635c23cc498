"""Inputs and outputs shared by all subject templates."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from files.links.port import LinkBuilder
from files.notification.content import RichText
from files.notification.notification import Action


@dataclass(frozen=True)
class RenderContext:
    translate: Callable[[str], str]
    parameters: Mapping[str, str]
    object_id: str
    links: LinkBuilder


@dataclass(frozen=True)
class TemplateOutput:
    subject: RichText
    message: RichText
    actions: tuple[Action, ...] = ()
