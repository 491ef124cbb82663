"""Command Line Interface for Study Page Analyzer."""

import os
import argparse
from dataclasses import replace

from .core.main_processor import AnalysisPipeline
from .output.json_generator import JSONGenerator
from .output.report_generator import ReportGenerator
from .output.summary_generator import SummaryGenerator
from .services.page_classifier import FixedPageClassifier
from .services.text_recognition import SuryaTextRecognizer
from .utils.image_utils import ImageUtils
from .utils.pdf_utils import PDFUtils
from .utils.logging_config import set_package_level
from .utils.settings import Settings


def _load_images(path, pages, dpi):
    if path.lower().endswith('.pdf'):
        return PDFUtils.render_pages(path, pages, dpi)
    return [(None, ImageUtils.load_image(path))]


def main(argv=None):
    parser = argparse.ArgumentParser(description='Derive math results and summaries from a study page')
    parser.add_argument('path', help='Text file with recognized text, or a page image / PDF to OCR')
    parser.add_argument('--page-type', default='Unknown', help='Page label from the classifier (Math, Text, Unknown)')
    parser.add_argument('--pages', help='Comma-separated PDF page numbers (1-indexed, default: all)')
    parser.add_argument('--sentences', type=int, help='Number of summary sentences')
    parser.add_argument('--output', help='Write JSON results to this file')
    parser.add_argument('--no-full-text', action='store_true', help='Omit the full text from the report')
    
    args = parser.parse_args(argv)
    
    if not os.path.exists(args.path):
        print(f"Error: file not found: {args.path}")
        return 1
    
    settings = Settings.from_env()
    if args.sentences is not None:
        if args.sentences < 1:
            print("Error: --sentences must be at least 1")
            return 1
        settings = replace(settings, summary_sentence_count=args.sentences)
    set_package_level(settings.log_level)
    
    try:
        page_numbers = [int(p.strip()) - 1 for p in args.pages.split(',')] if args.pages else None
    except ValueError:
        print(f"Error: Invalid page numbers format: {args.pages}")
        return 1
    
    pipeline = AnalysisPipeline(settings=settings)
    results = []
    
    if args.path.lower().endswith('.pdf') or ImageUtils.is_image_path(args.path):
        recognizer = SuryaTextRecognizer()
        classifier = FixedPageClassifier(args.page_type)
        for page_num, image in _load_images(args.path, page_numbers, settings.pdf_dpi):
            results.append((page_num, pipeline.analyze_image(image, recognizer, classifier)))
    else:
        with open(args.path, encoding='utf-8') as f:
            results.append((None, pipeline.analyze(f.read(), args.page_type)))
    
    for page_num, result in results:
        if page_num is not None:
            print(f"\n=== Page {page_num + 1} ===")
        print(ReportGenerator.render(result, include_full_text=not args.no_full_text))
    
    if args.output:
        payload = {
            'pages': [
                {
                    'metadata': JSONGenerator.create_page_metadata(
                        args.path, None if page_num is None else page_num + 1, settings.pdf_dpi),
                    'result': JSONGenerator.result_to_dict(result),
                }
                for page_num, result in results
            ],
            'summary': SummaryGenerator.create_batch_summary(result for _, result in results),
        }
        JSONGenerator.write_results(payload, args.output)
        print(f"\nResults saved to: {args.output}")
    
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
