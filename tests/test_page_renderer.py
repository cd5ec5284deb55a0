"""Tests for the page renderer and site chrome."""

import json
import re

import pytest
from lxml import html as lxml_html

from paper_pages.citations import bibtex_entry
from paper_pages.renderers.chrome import SiteChrome
from paper_pages.renderers.page_renderer import PageRenderer, doi_url
from schemas.paper import LookupTables, Paper
from schemas.site import SiteSettings

SCENARIO_RECORD = {
    "id": "alpha-1",
    "title": "Alpha",
    "abstract": "An abstract.",
    "authors": ["Jane A. Doe"],
    "date": "2024-03-05",
    "status": "published",
    "tags": ["ml"],
    "wpNumber": "WP1",
}

SCENARIO_TABLES = LookupTables(
    tags={"ml": "Machine Learning"},
    statuses={"published": "Published"},
)


def parse(document: str):
    return lxml_html.document_fromstring(document)


def meta_content(doc, key: str) -> list[str]:
    return doc.xpath(f'//meta[@name="{key}" or @property="{key}"]/@content')


def embedded_bibtex(document: str) -> str:
    match = re.search(r"var bibtex = (.*);\n", document)
    assert match is not None
    return json.loads(match.group(1))


def structured_data(doc) -> dict:
    (script,) = doc.xpath('//script[@type="application/ld+json"]/text()')
    return json.loads(script)


@pytest.fixture
def renderer(sample_tables):
    return PageRenderer(sample_tables)


@pytest.fixture
def chrome():
    return SiteChrome()


class TestDoiUrl:
    """Tests for doi_url."""

    def test_bare_doi_resolves_through_doi_org(self):
        assert doi_url("10.5281/zenodo.1") == "https://doi.org/10.5281/zenodo.1"

    def test_url_used_as_is(self):
        assert doi_url("https://zenodo.org/records/1") == "https://zenodo.org/records/1"


class TestScenarios:
    """End-to-end rendering scenarios."""

    def test_working_paper(self):
        """Scenario A: citation date, status label and howpublished."""
        paper = Paper.model_validate(SCENARIO_RECORD)
        document = PageRenderer(SCENARIO_TABLES).render(paper)
        doc = parse(document)

        assert meta_content(doc, "citation_publication_date") == ["2024/03/05"]
        status = doc.xpath('//span[contains(@class, "paper-detail__status")]/text()')
        assert status == ["Published"]
        assert "howpublished = {Dissensus AI Working Paper WP1}" in embedded_bibtex(document)

    def test_discussion_paper(self):
        """Scenario B: a DP series number makes a discussion paper."""
        paper = Paper.model_validate({**SCENARIO_RECORD, "wpNumber": "DP2"})
        document = PageRenderer(SCENARIO_TABLES).render(paper)
        assert "howpublished = {Dissensus AI Discussion Paper DP2}" in embedded_bibtex(document)

    def test_no_identifier_and_no_pdf(self):
        """Scenario C: no DOI link, no PDF link and no matching meta tags."""
        paper = Paper.model_validate(SCENARIO_RECORD)
        doc = parse(PageRenderer(SCENARIO_TABLES).render(paper))

        assert doc.xpath('//a[normalize-space(text())="DOI"]') == []
        assert doc.xpath('//a[normalize-space(text())="Download PDF"]') == []
        assert meta_content(doc, "citation_doi") == []
        assert meta_content(doc, "citation_pdf_url") == []
        assert meta_content(doc, "DC.identifier") == []


class TestRender:
    """Tests for PageRenderer.render."""

    def test_idempotent(self, renderer, sample_paper, chrome):
        first = renderer.render(sample_paper, chrome.navigation(), chrome.footer())
        second = renderer.render(sample_paper, chrome.navigation(), chrome.footer())
        assert first == second

    def test_document_structure(self, renderer, sample_paper):
        document = renderer.render(sample_paper)
        assert document.startswith("<!DOCTYPE html>\n<html lang=\"en\">")
        assert document.rstrip().endswith("</html>")
        doc = parse(document)
        assert doc.xpath("//title/text()") == ["Market Friction and Consensus — Dissensus AI"]
        assert doc.xpath('//link[@rel="canonical"]/@href') == [
            "https://dissensus.ai/papers/market-friction-2024.html"
        ]

    def test_all_optional_sections_present(self, renderer, sample_paper):
        doc = parse(renderer.render(sample_paper))

        assert doc.xpath('//p[@class="paper-detail__subtitle"]/text()') == [
            "Evidence from order books"
        ]
        assert doc.xpath('//span[@class="paper-detail__program"]/text()') == [
            "Market Microstructure"
        ]
        actions = doc.xpath('//div[@class="paper-detail__actions"]/a')
        assert [a.text for a in actions] == ["Download PDF", "DOI", "GitHub", "Dashboard"]
        assert actions[0].get("href") == "market-friction-2024.pdf"
        assert actions[1].get("href") == "https://doi.org/10.5281/zenodo.1234567"
        assert meta_content(doc, "citation_journal_title") == ["Journal of Disagreement"]
        assert meta_content(doc, "citation_technical_report_number") == ["WP3"]

    def test_optional_sections_absent(self, renderer, minimal_paper):
        document = renderer.render(minimal_paper)
        doc = parse(document)

        assert doc.xpath('//p[@class="paper-detail__subtitle"]') == []
        assert doc.xpath('//span[@class="paper-detail__program"]') == []
        assert doc.xpath('//div[@class="paper-detail__actions"]') == []
        assert doc.xpath('//section[@class="paper-detail__tags"]') == []
        assert meta_content(doc, "citation_journal_title") == []
        assert meta_content(doc, "citation_technical_report_number") == []
        assert "<span class=\"paper-detail__program\"></span>" not in document
        assert "DOI:" not in document

    def test_only_github_action(self, renderer, minimal_paper_record):
        paper = Paper.model_validate(
            {**minimal_paper_record, "github": "https://github.com/example/repo"}
        )
        doc = parse(renderer.render(paper))
        actions = doc.xpath('//div[@class="paper-detail__actions"]/a')
        assert [a.text for a in actions] == ["GitHub"]

    def test_zenodo_link_used_as_is(self, renderer, minimal_paper_record):
        paper = Paper.model_validate(
            {**minimal_paper_record, "zenodo": "https://zenodo.org/records/42"}
        )
        doc = parse(renderer.render(paper))
        assert doc.xpath('//a[text()="DOI"]/@href') == ["https://zenodo.org/records/42"]

    def test_unknown_labels_fall_back_to_keys(self, minimal_paper_record):
        paper = Paper.model_validate(
            {**minimal_paper_record, "status": "in-prep", "program": "labs", "tags": ["x1"]}
        )
        doc = parse(PageRenderer(LookupTables()).render(paper))
        assert doc.xpath('//span[contains(@class, "paper-detail__status")]/text()') == ["in-prep"]
        assert doc.xpath('//span[@class="paper-detail__program"]/text()') == ["labs"]
        assert doc.xpath('//span[@class="paper-detail__tag"]/text()') == ["x1"]

    def test_topics_use_tag_labels(self, renderer, sample_paper):
        doc = parse(renderer.render(sample_paper))
        assert doc.xpath('//span[@class="paper-detail__tag"]/text()') == [
            "Machine Learning",
            "Financial Markets",
        ]

    def test_display_date(self, renderer, sample_paper):
        doc = parse(renderer.render(sample_paper))
        assert doc.xpath('//span[@class="paper-detail__date"]/text()') == ["5 March 2024"]

    def test_suggested_citation(self, renderer, sample_paper):
        doc = parse(renderer.render(sample_paper))
        (block,) = doc.xpath('//div[@class="paper-detail__citation-block"]')
        text = " ".join(block.text_content().split())
        assert text == (
            "Murad Farzulla, Jane A. Doe (2024). Market Friction and Consensus. "
            "Dissensus AI Working Paper WP3. DOI: 10.5281/zenodo.1234567"
        )

    def test_meta_blocks_rendered(self, renderer, sample_paper):
        doc = parse(renderer.render(sample_paper))
        assert meta_content(doc, "citation_author") == ["Murad Farzulla", "Jane A. Doe"]
        assert meta_content(doc, "DC.date") == ["2024-03-05"]
        assert meta_content(doc, "og:type") == ["article"]
        assert meta_content(doc, "twitter:card") == ["summary"]
        assert doc.xpath('//meta[@property="og:title"]/@content') == [
            "Market Friction and Consensus"
        ]


class TestEscaping:
    """Escaping rules differ per output context."""

    TRICKY_TITLE = """Risk & "Reward" <in> Tom's </script> Markets"""

    @pytest.fixture
    def tricky_paper(self, minimal_paper_record):
        return Paper.model_validate(
            {
                **minimal_paper_record,
                "title": self.TRICKY_TITLE,
                "abstract": "Line one & <b>two</b>\nLine \"three\"",
            }
        )

    def test_html_contexts_escaped_once(self, renderer, tricky_paper):
        document = renderer.render(tricky_paper)
        assert "<in>" not in document
        assert "&amp;amp;" not in document
        assert (
            "Risk &amp; &#34;Reward&#34; &lt;in&gt; Tom&#39;s &lt;/script&gt; Markets"
            in document
        )

        doc = parse(document)
        assert meta_content(doc, "citation_title") == [self.TRICKY_TITLE]
        assert doc.xpath('//h1[@class="paper-detail__title"]/text()') == [self.TRICKY_TITLE]
        assert doc.xpath('//section[@class="paper-detail__abstract"]/p/b') == []

    def test_structured_data_is_json_encoded(self, renderer, tricky_paper):
        document = renderer.render(tricky_paper)
        data = structured_data(parse(document))
        assert data["headline"] == self.TRICKY_TITLE
        assert data["description"] == "Line one & <b>two</b> Line \"three\""
        assert "&quot;" not in data["headline"]
        assert "&#34;" not in data["headline"]

    def test_script_blocks_cannot_be_closed_early(self, renderer, tricky_paper):
        document = renderer.render(tricky_paper)
        assert document.count("</script>") == 2

    def test_bibtex_embedded_as_string_literal(self, renderer, tricky_paper):
        document = renderer.render(tricky_paper)
        assert embedded_bibtex(document) == bibtex_entry(tricky_paper, renderer.settings)


class TestChrome:
    """Tests for the navigation and footer fragments."""

    def test_fragments_inserted_verbatim(self, renderer, minimal_paper, chrome):
        navigation = chrome.navigation("research")
        footer = chrome.footer()
        document = renderer.render(minimal_paper, navigation, footer)
        assert str(navigation) in document
        assert str(footer) in document

    def test_active_link(self, chrome):
        doc = lxml_html.fragment_fromstring(
            str(chrome.navigation("research")), create_parent="div"
        )
        active = doc.xpath('//a[contains(@class, "site-nav__link--active")]/text()')
        assert active == ["Research"]

    def test_no_active_link(self, chrome):
        assert "site-nav__link--active" not in chrome.navigation("none")

    def test_custom_chrome_dir(self, tmp_path):
        (tmp_path / "nav.html.j2").write_text('<nav class="{{ active }}">Nav</nav>')
        (tmp_path / "footer.html.j2").write_text("<footer>Foot</footer>")
        chrome = SiteChrome(tmp_path)
        assert chrome.navigation("papers") == '<nav class="papers">Nav</nav>'
        assert chrome.footer() == "<footer>Foot</footer>"


class TestRendererSettings:
    """Tests for renderer configuration."""

    def test_output_path(self, renderer, sample_paper):
        assert renderer.output_path(sample_paper) == "papers/market-friction-2024.html"

    def test_custom_origin(self, sample_tables, minimal_paper):
        renderer = PageRenderer(sample_tables, SiteSettings(origin="https://example.org"))
        doc = parse(renderer.render(minimal_paper))
        assert doc.xpath('//link[@rel="canonical"]/@href') == [
            "https://example.org/papers/alpha-1.html"
        ]
