#!/usr/bin/env python3
"""
Demo script showing how to use the PDF Structure Processor
"""

import os
from dotenv import load_dotenv
from pdf_structure_processor import DocumentProcessor, LayoutThresholds

# Load environment variables from .env file
load_dotenv()

def main():
    # Get paths from environment variables
    pdf_path = os.getenv('PDF_PATH')
    output_dir = os.getenv('OUTPUT_DIR')
    pages = os.getenv('PAGES')

    if not pdf_path or not output_dir:
        print("❌ Error: Please set PDF_PATH and OUTPUT_DIR in your .env file")
        return

    # Initialize the processor
    processor = DocumentProcessor(
        thresholds=LayoutThresholds(indentation=20.0, min_margin=72.0)
    )

    try:
        # Process the document
        results = processor.process_document(
            pdf_path=pdf_path,
            output_dir=output_dir,
            page_numbers=[int(p) - 1 for p in pages.split(',')] if pages else None
        )

        print("✅ Structure reconstruction completed successfully!")
        print(f"📁 Results saved to: {output_dir}")
        print(f"📄 Pages processed: {len(results)}")

        for page in results:
            print(f"\n📖 page_{page.page_number}:")
            print(f"  - Text fragments: {page.fragment_count}")
            print(f"  - Line gap: {page.spacing.dominant_line_gap:.2f}")
            print(f"  - Blocks: {len(page.blocks)}")

    except Exception as e:
        print(f"❌ Error: {e}")


if __name__ == "__main__":
    main()
