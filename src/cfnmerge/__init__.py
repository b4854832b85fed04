"""
cfn-merge - compose CloudFormation templates from partial templates.

Templates reference each other with ``# @import`` comments: a whole-file
import merges every section of another template, an inline import splices
in a single section.
"""

__version__ = "1.0.0"

from cfnmerge.core.template import TemplateMerger, merge_document

__all__ = ["__version__", "TemplateMerger", "merge_document"]
