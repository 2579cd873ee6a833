"""Rubric checks, in evaluation order."""

from .meta_tags import check_title, check_meta_description, check_canonical, check_robots
from .content_structure import check_h1, check_word_count, check_images, check_heading_hierarchy
from .social import check_open_graph, check_twitter_card
from .structured_data import check_structured_data
from .links import check_links

# (rubric weight attribute, check). Order decides tie-breaks between
# recommendations of equal priority.
RUBRIC_CHECKS = (
    ("title_points", check_title),
    ("description_points", check_meta_description),
    ("h1_points", check_h1),
    ("word_count_points", check_word_count),
    ("image_alt_points", check_images),
    ("open_graph_points", check_open_graph),
    ("twitter_card_points", check_twitter_card),
    ("canonical_points", check_canonical),
    ("structured_data_points", check_structured_data),
    ("robots_points", check_robots),
    ("linking_points", check_links),
    ("heading_hierarchy_points", check_heading_hierarchy),
)

__all__ = [
    "RUBRIC_CHECKS",
    "check_title",
    "check_meta_description",
    "check_h1",
    "check_word_count",
    "check_images",
    "check_open_graph",
    "check_twitter_card",
    "check_canonical",
    "check_structured_data",
    "check_robots",
    "check_links",
    "check_heading_hierarchy",
]
