"""
Resx Codec - Read and write a single locale .resx file

A .resx file is an XML document whose `data` elements hold the entries:

    <data name="Menu_Save" xml:space="preserve">
      <value>Enregistrer</value>
    </data>

Reads never raise: a missing, unreadable or malformed file yields an empty
mapping so the other locales of a group can still be listed. Writes raise
ResxError subclasses and never overwrite a file they could not parse.
"""

import os
import shutil
import logging
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Union

from lxml import etree

from resx_translations.errors import (
    DuplicateKeyError,
    MalformedFileError,
    ResourceIOError,
    ResxError,
)
from resx_translations.utils.file_locks import PathLockRegistry

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

DATA_TAG = "data"
VALUE_TAG = "value"
NAME_ATTR = "name"
XML_SPACE_ATTR = "{http://www.w3.org/XML/1998/namespace}space"
NEW_FILE_MODE = 0o644

# Schema and resheader block expected by .NET resource tooling
EMPTY_RESX_DOCUMENT = """<?xml version="1.0" encoding="utf-8"?>
<root>
  <xsd:schema id="root" xmlns="" xmlns:xsd="http://www.w3.org/2001/XMLSchema" xmlns:msdata="urn:schemas-microsoft-com:xml-msdata">
    <xsd:import namespace="http://www.w3.org/XML/1998/namespace" />
    <xsd:element name="root" msdata:IsDataSet="true">
      <xsd:complexType>
        <xsd:choice maxOccurs="unbounded">
          <xsd:element name="metadata">
            <xsd:complexType>
              <xsd:sequence>
                <xsd:element name="value" type="xsd:string" minOccurs="0" />
              </xsd:sequence>
              <xsd:attribute name="name" use="required" type="xsd:string" />
              <xsd:attribute name="type" type="xsd:string" />
              <xsd:attribute name="mimetype" type="xsd:string" />
              <xsd:attribute ref="xml:space" />
            </xsd:complexType>
          </xsd:element>
          <xsd:element name="assembly">
            <xsd:complexType>
              <xsd:attribute name="alias" type="xsd:string" />
              <xsd:attribute name="name" type="xsd:string" />
            </xsd:complexType>
          </xsd:element>
          <xsd:element name="data">
            <xsd:complexType>
              <xsd:sequence>
                <xsd:element name="value" type="xsd:string" minOccurs="0" msdata:Ordinal="1" />
                <xsd:element name="comment" type="xsd:string" minOccurs="0" msdata:Ordinal="2" />
              </xsd:sequence>
              <xsd:attribute name="name" type="xsd:string" use="required" msdata:Ordinal="1" />
              <xsd:attribute name="type" type="xsd:string" msdata:Ordinal="3" />
              <xsd:attribute name="mimetype" type="xsd:string" msdata:Ordinal="4" />
              <xsd:attribute ref="xml:space" />
            </xsd:complexType>
          </xsd:element>
          <xsd:element name="resheader">
            <xsd:complexType>
              <xsd:sequence>
                <xsd:element name="value" type="xsd:string" minOccurs="0" msdata:Ordinal="1" />
              </xsd:sequence>
              <xsd:attribute name="name" type="xsd:string" use="required" />
            </xsd:complexType>
          </xsd:element>
        </xsd:choice>
      </xsd:complexType>
    </xsd:element>
  </xsd:schema>
  <resheader name="resmimetype">
    <value>text/microsoft-resx</value>
  </resheader>
  <resheader name="version">
    <value>2.0</value>
  </resheader>
  <resheader name="reader">
    <value>System.Resources.ResXResourceReader, System.Windows.Forms, Version=4.0.0.0, Culture=neutral, PublicKeyToken=b77a5c561934e089</value>
  </resheader>
  <resheader name="writer">
    <value>System.Resources.ResXResourceWriter, System.Windows.Forms, Version=4.0.0.0, Culture=neutral, PublicKeyToken=b77a5c561934e089</value>
  </resheader>
</root>
"""


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        recover=False,
        remove_blank_text=True,
    )


def _value_text(data_el: etree._Element) -> Optional[str]:
    """Text of the `value` child, None when the element has no value"""
    value_el = data_el.find(VALUE_TAG)
    if value_el is None:
        return None
    return "".join(value_el.itertext())


class ResxCodec:
    """
    Reader/writer for .resx files.

    Mutations of the same file are serialized through a per-path lock held
    by the codec instance, so share one codec between threads.

    Example:
        codec = ResxCodec()
        codec.write_entry("Resources/Menu.fr.resx", "Menu_Save", "Enregistrer")
        codec.read("Resources/Menu.fr.resx")  # {"Menu_Save": "Enregistrer"}
    """

    def __init__(self, encoding: str = "utf-8", locks: Optional[PathLockRegistry] = None):
        self.encoding = encoding
        self.locks = locks or PathLockRegistry()

    # =========================================================================
    # Read
    # =========================================================================

    def read(self, path: PathLike) -> Dict[str, str]:
        """
        Read every entry of a file.

        Args:
            path: .resx file path

        Returns:
            key -> text mapping; empty when the file is missing or broken
        """
        path = Path(path)
        if not path.is_file():
            logger.warning(f"Resource file not found: {path}")
            return {}

        try:
            tree = etree.parse(str(path), _make_parser())
        except etree.XMLSyntaxError as e:
            logger.error(f"Malformed resource file {path}: {e}")
            return {}
        except OSError as e:
            logger.error(f"Cannot read resource file {path}: {e}")
            return {}

        entries: Dict[str, str] = {}
        for data_el in tree.getroot().iter(DATA_TAG):
            name = data_el.get(NAME_ATTR)
            value = _value_text(data_el)
            if name is not None and value is not None:
                entries[name] = value
        return entries

    # =========================================================================
    # Write
    # =========================================================================

    def write_entry(self, path: PathLike, key: str, value: str) -> None:
        """
        Insert a new entry, creating the file if needed.

        Raises:
            DuplicateKeyError: the key already exists (file left untouched)
            MalformedFileError: the existing file cannot be parsed
            ResourceIOError: the file cannot be read or written
        """
        path = Path(path)
        with self.locks.hold(path):
            tree = self._load_or_create(path)
            root = tree.getroot()
            if self._find_data(root, key):
                raise DuplicateKeyError(key, path)
            self._append_data(root, key, value, path)
            self._save(tree, path)
        logger.debug(f"Inserted '{key}' into {path}")

    def upsert_entry(self, path: PathLike, key: str, value: str) -> bool:
        """
        Set the text of a key, adding the entry when it does not exist.

        Returns:
            True if the file was modified

        Raises:
            MalformedFileError: the existing file cannot be parsed
            ResourceIOError: the file cannot be read or written
        """
        path = Path(path)
        with self.locks.hold(path):
            tree = self._load_or_create(path)
            root = tree.getroot()
            existing = self._find_data(root, key)

            if not existing:
                self._append_data(root, key, value, path)
            else:
                data_el = existing[0]
                if _value_text(data_el) == value:
                    return False
                self._set_value(data_el, key, value, path)

            self._save(tree, path)
        logger.debug(f"Upserted '{key}' into {path}")
        return True

    def remove_entry(self, path: PathLike, key: str) -> bool:
        """
        Remove every entry with the given key.

        A missing file holds no keys, so removing from it succeeds.

        Returns:
            True if the file was modified

        Raises:
            MalformedFileError: the existing file cannot be parsed
            ResourceIOError: the file cannot be read or written
        """
        path = Path(path)
        with self.locks.hold(path):
            if not path.exists():
                return False

            tree = self._load(path)
            matches = self._find_data(tree.getroot(), key)
            if not matches:
                return False

            for data_el in matches:
                data_el.getparent().remove(data_el)
            self._save(tree, path)
        logger.debug(f"Removed '{key}' from {path}")
        return True

    # =========================================================================
    # Internals
    # =========================================================================

    def _load(self, path: Path) -> etree._ElementTree:
        try:
            return etree.parse(str(path), _make_parser())
        except etree.XMLSyntaxError as e:
            raise MalformedFileError(f"Malformed resource file {path}: {e}", path) from e
        except OSError as e:
            raise ResourceIOError(f"Cannot read resource file {path}: {e}", path) from e

    def _load_or_create(self, path: Path) -> etree._ElementTree:
        if path.exists():
            return self._load(path)
        logger.info(f"Creating resource file {path}")
        root = etree.fromstring(EMPTY_RESX_DOCUMENT.encode("utf-8"), _make_parser())
        return etree.ElementTree(root)

    @staticmethod
    def _find_data(root: etree._Element, key: str) -> List[etree._Element]:
        return [el for el in root.iter(DATA_TAG) if el.get(NAME_ATTR) == key]

    def _append_data(self, root: etree._Element, key: str, value: str, path: Path) -> None:
        try:
            data_el = etree.Element(DATA_TAG)
            data_el.set(NAME_ATTR, key)
            data_el.set(XML_SPACE_ATTR, "preserve")
            value_el = etree.SubElement(data_el, VALUE_TAG)
            value_el.text = value
        except ValueError as e:
            raise ResxError(f"Entry '{key}' cannot be stored as XML: {e}", path) from e
        root.append(data_el)

    @staticmethod
    def _set_value(data_el: etree._Element, key: str, value: str, path: Path) -> None:
        value_el = data_el.find(VALUE_TAG)
        if value_el is None:
            value_el = etree.Element(VALUE_TAG)
            data_el.insert(0, value_el)
        for child in list(value_el):
            value_el.remove(child)
        try:
            value_el.text = value
        except ValueError as e:
            raise ResxError(f"Entry '{key}' cannot be stored as XML: {e}", path) from e

    def _save(self, tree: etree._ElementTree, path: Path) -> None:
        """Write through a temporary file and rename it over the target"""
        content = etree.tostring(
            tree,
            xml_declaration=True,
            encoding=self.encoding,
            pretty_print=True,
        )

        temp_path = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
            )
            with os.fdopen(temp_fd, "wb") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            if path.exists():
                shutil.copymode(path, temp_path)
            else:
                os.chmod(temp_path, NEW_FILE_MODE)
            os.replace(temp_path, path)
        except OSError as e:
            if temp_path and os.path.exists(temp_path):
                os.unlink(temp_path)
            raise ResourceIOError(f"Cannot write resource file {path}: {e}", path) from e
