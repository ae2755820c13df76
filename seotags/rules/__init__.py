from seotags.rules.adapter import RulesTagsAdapter
from seotags.rules.loader import load_rules
from seotags.rules.models import TagOutputRules, TagRules

__all__ = ["RulesTagsAdapter", "TagOutputRules", "TagRules", "load_rules"]
