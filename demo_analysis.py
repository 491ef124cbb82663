#!/usr/bin/env python3
"""
Demo script showing how to analyze a scanned study page
"""

import os
from dotenv import load_dotenv
from study_page_analyzer import AnalysisPipeline, Settings
from study_page_analyzer.output import ReportGenerator
from study_page_analyzer.services import FixedPageClassifier, SuryaTextRecognizer
from study_page_analyzer.utils import ImageUtils

# Load environment variables from .env file
load_dotenv()

def main():
    # Get the page image and its label from environment variables
    page_path = os.getenv('PAGE_PATH')
    page_type = os.getenv('PAGE_TYPE', 'Unknown')
    
    if not page_path:
        print("❌ Error: Please set PAGE_PATH in your .env file")
        return
    
    pipeline = AnalysisPipeline(settings=Settings.from_env())
    
    try:
        result = pipeline.analyze_image(
            ImageUtils.load_image(page_path),
            recognizer=SuryaTextRecognizer(),
            classifier=FixedPageClassifier(page_type)
        )
        
        print("✅ Page analyzed successfully!")
        print(ReportGenerator.render(result))
            
    except Exception as e:
        print(f"❌ Error: {e}")


if __name__ == "__main__":
    main()
