"""Ready-made JNLP render strategy.

``JnlpTemplate`` is a callable ``(file_name, assets) -> Element`` that can be
used directly as a ``DescriptorConfig.render``. It covers the common shape
of a Java Web Start application descriptor; anything more exotic can still
be expressed as a hand-written render function.

Layout produced::

    <jnlp spec="1.0+" codebase=".." href="app.jnlp">
      <information>
        <title/> <vendor/> <homepage/> <description/> <icon/> <offline-allowed/>
      </information>
      <security><all-permissions/></security>
      <resources>
        <j2se version=".." max-heap-size=".."/>
        <jar href=".." main="true" size=".."/>
        ...
      </resources>
      <application-desc main-class="..">
        <argument>..</argument>
      </application-desc>
    </jnlp>
"""

from __future__ import annotations

from collections.abc import Sequence
from xml.etree import ElementTree as ET

from pydantic import BaseModel, ConfigDict

from jnlpforge.models.artifacts import DescriptorAsset
from jnlpforge.models.config import DescriptorConfig


class JnlpTemplate(BaseModel):
    """Standard application descriptor, parameterised by project metadata."""

    model_config = ConfigDict(frozen=True)

    codebase: str | None = None
    title: str
    vendor: str
    description: str | None = None
    homepage: str | None = None
    icon: str | None = None
    offline_allowed: bool = True
    all_permissions: bool = True
    java_version: str = "1.8+"
    max_heap: str | None = None
    main_class: str
    arguments: list[str] = []

    def __call__(self, file_name: str, assets: Sequence[DescriptorAsset]) -> ET.Element:
        root = ET.Element("jnlp", {"spec": "1.0+"})
        if self.codebase is not None:
            root.set("codebase", self.codebase)
        root.set("href", file_name)

        info = ET.SubElement(root, "information")
        ET.SubElement(info, "title").text = self.title
        ET.SubElement(info, "vendor").text = self.vendor
        if self.homepage is not None:
            ET.SubElement(info, "homepage", {"href": self.homepage})
        if self.description is not None:
            ET.SubElement(info, "description").text = self.description
        if self.icon is not None:
            ET.SubElement(info, "icon", {"href": self.icon})
        if self.offline_allowed:
            ET.SubElement(info, "offline-allowed")

        if self.all_permissions:
            security = ET.SubElement(root, "security")
            ET.SubElement(security, "all-permissions")

        resources = ET.SubElement(root, "resources")
        j2se = ET.SubElement(resources, "j2se", {"version": self.java_version})
        if self.max_heap is not None:
            j2se.set("max-heap-size", self.max_heap)
        resources.extend(asset.to_element() for asset in assets)

        app = ET.SubElement(root, "application-desc", {"main-class": self.main_class})
        for argument in self.arguments:
            ET.SubElement(app, "argument").text = argument

        ET.indent(root)
        return root

    def descriptor(self, file_name: str) -> DescriptorConfig:
        """Wrap this template in a DescriptorConfig writing *file_name*."""
        return DescriptorConfig(file_name=file_name, render=self)
