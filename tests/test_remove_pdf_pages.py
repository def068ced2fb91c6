"""Tests for the remove-pdf-pages tool."""

from pathlib import Path

import pypdf
import pytest
from conftest import page_labels
from tools.remove_pdf_pages import find_invalid_pages, remove_pdf_pages


class TestRemovePdfPages:
    @pytest.mark.asyncio
    async def test_removes_requested_pages(self, make_pdf) -> None:
        pdf = make_pdf("doc", 5)

        result = await remove_pdf_pages(pdfPath=str(pdf), pageNumbers=[2, 4])

        assert result == "Successfully removed 2 pages from the PDF."
        assert page_labels(pdf) == ["doc-p1", "doc-p3", "doc-p5"]

    @pytest.mark.asyncio
    async def test_removal_order_does_not_matter(self, make_pdf) -> None:
        first = make_pdf("a", 4)
        second = make_pdf("b", 4)

        await remove_pdf_pages(pdfPath=str(first), pageNumbers=[3, 1])
        await remove_pdf_pages(pdfPath=str(second), pageNumbers=[1, 3])

        assert page_labels(first) == ["a-p2", "a-p4"]
        assert page_labels(second) == ["b-p2", "b-p4"]

    @pytest.mark.asyncio
    async def test_duplicate_page_numbers_remove_once(self, make_pdf) -> None:
        pdf = make_pdf("doc", 4)

        result = await remove_pdf_pages(pdfPath=str(pdf), pageNumbers=[2, 2])

        assert result == "Successfully removed 1 pages from the PDF."
        assert page_labels(pdf) == ["doc-p1", "doc-p3", "doc-p4"]

    @pytest.mark.asyncio
    async def test_remove_last_remaining_pages_but_one(self, make_pdf) -> None:
        pdf = make_pdf("doc", 3)

        result = await remove_pdf_pages(pdfPath=str(pdf), pageNumbers=[1, 2])

        assert result == "Successfully removed 2 pages from the PDF."
        assert page_labels(pdf) == ["doc-p3"]

    @pytest.mark.asyncio
    async def test_remove_all_pages(self, make_pdf) -> None:
        pdf = make_pdf("doc", 2)

        result = await remove_pdf_pages(pdfPath=str(pdf), pageNumbers=[1, 2])

        assert result == "Successfully removed 2 pages from the PDF."
        assert pdf.read_bytes().startswith(b"%PDF-")
        assert len(pypdf.PdfReader(str(pdf)).pages) == 0

    @pytest.mark.asyncio
    async def test_empty_page_list_removes_nothing(self, make_pdf) -> None:
        pdf = make_pdf("doc", 2)

        result = await remove_pdf_pages(pdfPath=str(pdf), pageNumbers=[])

        assert result == "Successfully removed 0 pages from the PDF."
        assert page_labels(pdf) == ["doc-p1", "doc-p2"]

    @pytest.mark.asyncio
    async def test_invalid_pages_are_reported_and_nothing_removed(
        self, make_pdf
    ) -> None:
        pdf = make_pdf("doc", 3)
        original = pdf.read_bytes()

        result = await remove_pdf_pages(pdfPath=str(pdf), pageNumbers=[0, 2, 7, 0])

        assert result == "Error: Invalid page numbers: 0, 7. The document has 3 pages."
        assert pdf.read_bytes() == original

    @pytest.mark.asyncio
    async def test_negative_page_number_is_invalid(self, make_pdf) -> None:
        pdf = make_pdf("doc", 2)

        result = await remove_pdf_pages(pdfPath=str(pdf), pageNumbers=[-1])

        assert result == "Error: Invalid page numbers: -1. The document has 2 pages."

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing.pdf"

        result = await remove_pdf_pages(pdfPath=str(missing), pageNumbers=[1])

        assert result == f"Error processing PDF: File not found: {missing}"
        assert not missing.exists()

    @pytest.mark.asyncio
    async def test_corrupt_file_is_left_untouched(self, tmp_path: Path) -> None:
        corrupt = tmp_path / "corrupt.pdf"
        corrupt.write_bytes(b"this is not a pdf")

        result = await remove_pdf_pages(pdfPath=str(corrupt), pageNumbers=[1])

        assert result.startswith("Error")
        assert corrupt.read_bytes() == b"this is not a pdf"


class TestFindInvalidPages:
    def test_all_valid(self) -> None:
        assert find_invalid_pages([1, 2, 3], 3) == []

    def test_keeps_first_seen_order_without_duplicates(self) -> None:
        assert find_invalid_pages([9, 1, 0, 9, 4], 3) == [9, 0, 4]

    def test_empty_document_rejects_everything(self) -> None:
        assert find_invalid_pages([1], 0) == [1]
