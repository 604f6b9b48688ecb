"""XML report generation for discovered views."""

from xml.etree.ElementTree import Element, SubElement, tostring
from xml.dom import minidom

from .db import Database


def generate_xml_report(db: Database) -> str:
    """Generate an XML report of the views found in a database.

    Args:
        db: The Database snapshot to describe.

    Returns:
        Pretty-printed XML string.
    """
    root = Element("view_discovery")

    # Add connection info
    connection = SubElement(root, "connection")
    connection.text = db.connection_string
    connection.set("postgres_version", db.major_version)
    SubElement(root, "views_dir").text = str(db.views_dir)

    views = SubElement(root, "views")
    for view in db.views:
        view_elem = SubElement(views, "view")
        view_elem.set("materialized", str(view.materialized).lower())
        view_elem.set("version", str(view.version))
        SubElement(view_elem, "name").text = view.qualified_name
        if view.source is not None:
            SubElement(view_elem, "source").text = str(view.source)
        SubElement(view_elem, "definition").text = view.definition

    SubElement(root, "number_of_views").text = str(len(db.views))

    # Pretty print the XML
    rough_string = tostring(root, encoding="unicode")
    reparsed = minidom.parseString(rough_string)
    return reparsed.toprettyxml(indent="  ")
