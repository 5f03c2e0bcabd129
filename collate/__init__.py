"""
Collate - Portfolio excerpts from version-control authorship.

Finds the parts of a source tree that one contributor mostly wrote:
- git blame line attribution
- Tree-sitter based class/method segmentation for Java and Python
- Heading-delimited section segmentation for Markdown
- Threshold test and contiguous merge of owned units

The result is a Markdown document quoting each owned region.
"""

__version__ = "0.1.0"
