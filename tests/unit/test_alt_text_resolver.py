"""Unit tests for AltTextResolver."""

from __future__ import annotations

import logging

import pytest

from src.application.services.alt_text_resolver import AltTextResolver
from src.domain.models import (
    DocumentStructure,
    ImageBlock,
    ImageReference,
    ImageType,
    PageStructure,
)
from src.domain.policy.alt_text_policy import AltTextPolicy


class FixedDescriber:
    """Image describer returning a fixed description."""
    
    def __init__(self, description: str | None) -> None:
        self.description = description
        self.calls: list[str] = []
    
    def describe(self, image: ImageReference | ImageBlock) -> str | None:
        self.calls.append(image.id)
        return self.description


def _with_block(block: ImageBlock) -> DocumentStructure:
    return DocumentStructure(pages=[PageStructure(page_number=1, image_blocks=[block])])


def _with_reference(image: ImageReference) -> DocumentStructure:
    return DocumentStructure(images=[image])


@pytest.mark.parametrize(
    ("image_type", "expected"),
    [
        (ImageType.FIGURE, "Figure: Illustration"),
        (ImageType.CHART, "Chart: Data visualization"),
        (ImageType.DIAGRAM, "Diagram: Visual diagram"),
        (ImageType.FORMULA_IMAGE, "Mathematical formula"),
        (ImageType.PHOTO, "Image: Content image"),
        (ImageType.OTHER, "Image: Content image"),
        (None, "Image: Content image"),
    ],
)
def test_document_image_type_fallback(image_type, expected):
    """Test type-based alt text for document-level images without caption."""
    image = ImageReference(id="img", image_type=image_type)
    
    AltTextResolver().resolve(_with_reference(image))
    
    assert image.alt_text == expected


def test_block_chart_without_caption_is_flagged():
    """Chart block with no caption gets type text and is flagged for review."""
    block = ImageBlock(id="img", image_type=ImageType.CHART)
    
    AltTextResolver().resolve(_with_block(block))
    
    assert block.alt_text == "Chart: Data visualization"
    assert block.requires_alt_text is True


def test_block_formula_falls_through_to_generic():
    """Block-level formula images get the generic text by default."""
    block = ImageBlock(id="img", image_type=ImageType.FORMULA_IMAGE)
    
    AltTextResolver().resolve(_with_block(block))
    
    assert block.alt_text == "Image: Content image"
    assert block.requires_alt_text is True


def test_block_formula_label_when_enabled():
    """Block-level formula images get the formula label when the policy enables it."""
    block = ImageBlock(id="img", image_type=ImageType.FORMULA_IMAGE)
    
    AltTextResolver(policy=AltTextPolicy(formula_label_for_blocks=True)).resolve(_with_block(block))
    
    assert block.alt_text == "Mathematical formula"


def test_caption_used_verbatim():
    """A non-empty caption becomes the alt text regardless of type."""
    image = ImageReference(id="i1", image_type=ImageType.CHART, caption="Sales by quarter")
    block = ImageBlock(id="i2", image_type=ImageType.FIGURE, caption="A sunset over mountains")
    structure = DocumentStructure(images=[image], pages=[PageStructure(image_blocks=[block])])
    
    AltTextResolver().resolve(structure)
    
    assert image.alt_text == "Sales by quarter"
    assert block.alt_text == "A sunset over mountains"
    assert block.requires_alt_text is False
    assert block.caption == "A sunset over mountains"


def test_decorative_gets_empty_alt_text_and_ignores_caption():
    """Decorative images always resolve to empty alt text and are never flagged."""
    block = ImageBlock(id="i1", image_type=ImageType.DECORATIVE, caption="ignored")
    image = ImageReference(id="i2", image_type=ImageType.DECORATIVE, caption="ignored")
    structure = DocumentStructure(images=[image], pages=[PageStructure(image_blocks=[block])])
    
    AltTextResolver().resolve(structure)
    
    assert block.alt_text == ""
    assert block.requires_alt_text is False
    assert image.alt_text == ""
    assert block.caption == "ignored"


def test_existing_alt_text_untouched():
    """Non-empty alt text is never overwritten."""
    block = ImageBlock(id="i1", image_type=ImageType.CHART, alt_text="Revenue chart", caption="Other")
    
    AltTextResolver().resolve(_with_block(block))
    
    assert block.alt_text == "Revenue chart"
    assert block.requires_alt_text is False


def test_empty_alt_text_treated_as_missing():
    """Empty alt text on a non-decorative image is replaced."""
    image = ImageReference(id="i1", image_type=ImageType.DIAGRAM, alt_text="")
    
    AltTextResolver().resolve(_with_reference(image))
    
    assert image.alt_text == "Diagram: Visual diagram"


def test_empty_caption_falls_through_to_type():
    """An empty caption does not count as a caption."""
    block = ImageBlock(id="i1", image_type=ImageType.FIGURE, caption="")
    
    AltTextResolver().resolve(_with_block(block))
    
    assert block.alt_text == "Figure: Illustration"
    assert block.requires_alt_text is True


def test_describer_used_before_type_fallback():
    """A configured describer supplies text for images without caption."""
    describer = FixedDescriber("Bar chart comparing three regions")
    block = ImageBlock(id="i1", image_type=ImageType.CHART)
    captioned = ImageBlock(id="i2", image_type=ImageType.CHART, caption="Caption")
    structure = DocumentStructure(pages=[PageStructure(image_blocks=[block, captioned])])
    
    AltTextResolver(describer=describer).resolve(structure)
    
    assert block.alt_text == "Bar chart comparing three regions"
    assert block.requires_alt_text is True
    assert describer.calls == ["i1"]


@pytest.mark.parametrize("description", [None, "", "   "])
def test_describer_without_description_falls_back(description):
    """Blank describer output falls back to the type-based text."""
    image = ImageReference(id="i1", image_type=ImageType.FIGURE)
    
    AltTextResolver(describer=FixedDescriber(description)).resolve(_with_reference(image))
    
    assert image.alt_text == "Figure: Illustration"


def test_failing_describer_falls_back_to_type(caplog):
    """A describer error is logged and the type-based text is used instead."""
    
    class FailingDescriber:
        def describe(self, image):
            raise RuntimeError("model down")
    
    block = ImageBlock(id="i1", image_type=ImageType.CHART)
    
    with caplog.at_level(logging.WARNING, logger="src.application.services.alt_text_resolver"):
        AltTextResolver(describer=FailingDescriber()).resolve(_with_block(block))
    
    assert block.alt_text == "Chart: Data visualization"
    assert block.requires_alt_text is True
    assert any("model down" in r.getMessage() for r in caplog.records)


def test_flagging_can_be_disabled():
    """Generated alt text is not flagged when the policy disables flagging."""
    block = ImageBlock(id="i1", image_type=ImageType.CHART)
    
    AltTextResolver(policy=AltTextPolicy(flag_generated_alt_text=False)).resolve(_with_block(block))
    
    assert block.alt_text == "Chart: Data visualization"
    assert block.requires_alt_text is False


def test_resolve_is_idempotent():
    """A second pass changes nothing."""
    blocks = [
        ImageBlock(id="a", image_type=ImageType.CHART),
        ImageBlock(id="b", image_type=ImageType.DECORATIVE),
        ImageBlock(id="c", image_type=ImageType.FIGURE, caption="Map"),
    ]
    structure = DocumentStructure(
        images=[ImageReference(id="d", image_type=ImageType.FORMULA_IMAGE)],
        pages=[PageStructure(image_blocks=blocks)],
    )
    resolver = AltTextResolver()
    
    resolver.resolve(structure)
    snapshot = [(b.alt_text, b.requires_alt_text) for b in blocks] + [(structure.images[0].alt_text, None)]
    resolver.resolve(structure)
    
    assert [(b.alt_text, b.requires_alt_text) for b in blocks] + [(structure.images[0].alt_text, None)] == snapshot


def test_resolve_returns_same_instance():
    """The structure is mutated in place and returned."""
    structure = DocumentStructure()
    
    assert AltTextResolver().resolve(structure) is structure
