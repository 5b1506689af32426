"""Command Line Interface for PDF Structure Processor."""

import os
import argparse
import traceback
from .core.main_processor import DocumentProcessor
from .models.enums import BlockType


def main(argv=None):
    parser = argparse.ArgumentParser(description='Reconstruct headings, paragraphs and list items from a PDF')
    parser.add_argument('pdf_path', help='Path to PDF file')
    parser.add_argument('--output_dir', help='Output directory (default: auto-generated)')
    parser.add_argument('--pages', help='Comma-separated page numbers (1-indexed, default: all pages)')
    parser.add_argument('--quiet', action='store_true', help='Suppress per-page progress output')

    args = parser.parse_args(argv)

    if not os.path.exists(args.pdf_path):
        print(f"Error: PDF file not found: {args.pdf_path}")
        return 1

    pdf_path = args.pdf_path
    document_name = os.path.splitext(os.path.basename(pdf_path))[0]
    output_dir = args.output_dir or f"html_results/{document_name}"

    page_numbers = None
    if args.pages:
        try:
            page_numbers = [int(p.strip()) - 1 for p in args.pages.split(',')]
        except ValueError:
            print(f"Error: Invalid page numbers format: {args.pages}")
            return 1

    processor = DocumentProcessor(verbose=not args.quiet)

    try:
        results = processor.process_document(
            pdf_path=pdf_path,
            output_dir=output_dir,
            page_numbers=page_numbers
        )

        total_pages = len(results)
        total_fragments = sum(page.fragment_count for page in results)
        total_blocks = sum(len(page.blocks) for page in results)
        headings = [block for page in results for block in page.blocks if block.heading_level]
        list_items = sum(1 for page in results for block in page.blocks
                         if block.block_type == BlockType.LIST_ITEM)

        print(f"\n=== Processing Summary ===")
        print(f"PDF: {pdf_path}")
        print(f"Output: {output_dir}")
        print(f"Pages processed: {total_pages}")
        print(f"Text fragments: {total_fragments}")
        print(f"Blocks: {total_blocks}")
        print(f"Headings: {len(headings)}")
        print(f"List items: {list_items}")

        if headings:
            print("\n=== Headings ===")
            for block in headings:
                print(f"  h{block.heading_level} {block.content}")

        return 0

    except Exception as e:
        print(f"Error processing document: {e}")
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
