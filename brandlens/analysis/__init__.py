"""Brand Visibility Engine.

Measures how prominently a brand and its competitors appear in text
generated by an LLM:
  1. Alias Generator
  2. Mention Counter
  3. Position Ranker
  4. Sentiment Scorer
  5. Visibility Calculator
  6. Domain Extractor

Input:  (prompt, response) pairs + brand + ordered competitors
Output: AnalysisResult per response (metrics for the storage layer)
"""
