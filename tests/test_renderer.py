import pytest
from bpgen.config import Variant
from bpgen.renderer import (
    RenderContext,
    render_component,
    render_files,
    render_styles,
)


def test_ionic_component() -> None:
    code = render_component(Variant.IONIC, RenderContext(name="Card"))

    assert "import React from 'react';" in code
    assert "import StyledDiv from './Card.styles';" in code
    assert "interface CardProps {}" in code
    assert (
        "export default function Card(props: CardProps): React.ReactElement | null {"
        in code
    )
    assert "<StyledDiv>" in code and "</StyledDiv>" in code


def test_ionic_styles() -> None:
    styles = render_styles(Variant.IONIC, RenderContext(name="Card"))

    assert 'import styled from "components/styled";' in styles
    assert "export default styled('div')`" in styles
    assert "Card.tsx" in styles
    assert styles.rstrip().endswith("`")


def test_ionic_ignores_class_token() -> None:
    rendered = render_files(Variant.IONIC, RenderContext(name="Card", class_token="abc12345"))
    assert "abc12345" not in rendered.component
    assert "abc12345" not in rendered.styles


def test_scoped_files_share_token() -> None:
    context = RenderContext(name="Card", class_token="Xy7Qa0bZ")
    rendered = render_files(Variant.SCOPED, context)

    assert 'className="Xy7Qa0bZ"' in rendered.component
    assert ".Xy7Qa0bZ {" in rendered.styles
    assert "import type { CardProps } from './Card.types';" in rendered.component
    assert "export default function Card(props: CardProps)" in rendered.component
    assert "interface CardProps" not in rendered.component
    assert "Card.tsx" in rendered.styles


def test_scoped_requires_token() -> None:
    with pytest.raises(ValueError, match="requires a class token"):
        render_component(Variant.SCOPED, RenderContext(name="Card"))
    with pytest.raises(ValueError, match="requires a class token"):
        render_styles(Variant.SCOPED, RenderContext(name="Card"))


def test_rendering_is_deterministic() -> None:
    context = RenderContext(name="Card", class_token="Xy7Qa0bZ")
    assert render_files(Variant.SCOPED, context) == render_files(Variant.SCOPED, context)


def test_name_inserted_verbatim() -> None:
    # No escaping: the name lands in the source exactly as given
    code = render_component(Variant.IONIC, RenderContext(name="My<Card>"))
    assert "function My<Card>(" in code


def test_templates_end_with_newline() -> None:
    rendered = render_files(Variant.IONIC, RenderContext(name="Card"))
    assert rendered.component.startswith("\n")
    assert rendered.component.endswith("}   \n")
    assert rendered.styles.endswith("`\n")


IONIC_CARD_COMPONENT = """
import React from 'react';
import StyledDiv from './Card.styles';

interface CardProps {}
export default function Card(props: CardProps): React.ReactElement | null {
    return (
        <StyledDiv>

        </StyledDiv>
    );
}   
"""

IONIC_CARD_STYLES = """
import styled from "components/styled";
export default styled('div')`

    /* 
    Your css goes here. 
    Change the "div" string to any html tag or any Ionic React component. This 
    will be the main styled body of your component. 

    NOTE: All styles that apply to Card.tsx and its children should all 
    be placed here.
    */

`
"""


def test_ionic_output_is_exact() -> None:
    # Trailing whitespace included: output matches the long-standing bp template
    rendered = render_files(Variant.IONIC, RenderContext(name="Card"))
    assert rendered.component == IONIC_CARD_COMPONENT
    assert rendered.styles == IONIC_CARD_STYLES
