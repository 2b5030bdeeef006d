"""Common test fixtures."""

import os
from pathlib import Path
from textwrap import dedent

import pytest

from dataverse_schema.config import reset_config
from dataverse_schema.schema.models import (
    Attribute,
    AttributeType,
    Entity,
    GeneratorOptions,
    OptionValue,
    RequiredLevel,
)

BASE_ID = "https://schemas.example.com/dataverse/"

SAMPLE_CUSTOMIZATIONS = dedent(
    """\
    <?xml version="1.0" encoding="utf-8"?>
    <ImportExportXml xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">
      <Entities>
        <Entity>
          <Name LocalizedName="Contact" OriginalName="Contact">Contact</Name>
          <EntityInfo>
            <entity Name="Contact" primaryidattribute="contactid" primaryattribute="fullname">
              <LocalizedNames>
                <LocalizedName description="Contact" languagecode="1033" />
              </LocalizedNames>
              <attributes>
                <attribute PhysicalName="ContactId">
                  <Type>primarykey</Type>
                  <RequiredLevel>systemrequired</RequiredLevel>
                </attribute>
                <attribute PhysicalName="FullName">
                  <Type>nvarchar</Type>
                  <MaxLength>160</MaxLength>
                </attribute>
              </attributes>
            </entity>
          </EntityInfo>
        </Entity>
        <Entity>
          <Name LocalizedName="Account" OriginalName="Account">Account</Name>
          <EntityInfo>
            <entity Name="Account" primaryidattribute="accountid" primaryattribute="name">
              <LocalizedNames>
                <LocalizedName description="Compte" languagecode="1036" />
                <LocalizedName description="Account" languagecode="1033" />
              </LocalizedNames>
              <Descriptions>
                <Description description="Business that represents a customer." languagecode="1033" />
              </Descriptions>
              <attributes>
                <attribute PhysicalName="Name">
                  <Type>nvarchar</Type>
                  <Length>160</Length>
                  <RequiredLevel>required</RequiredLevel>
                </attribute>
                <attribute PhysicalName="AccountId">
                  <Type>primarykey</Type>
                  <RequiredLevel>systemrequired</RequiredLevel>
                </attribute>
                <attribute PhysicalName="IndustryCode">
                  <Type>picklist</Type>
                  <RequiredLevel>none</RequiredLevel>
                  <optionset Name="account_industrycode">
                    <option value="2">
                      <labels>
                        <label description="Agriculture" languagecode="1033" />
                      </labels>
                    </option>
                    <option value="1">
                      <labels>
                        <label description="Comptabilite" languagecode="1036" />
                        <label description="Accounting" languagecode="1033" />
                      </labels>
                      <Descriptions>
                        <Description description="Accounting firms" languagecode="1033" />
                      </Descriptions>
                    </option>
                    <option value="abc">
                      <labels>
                        <label description="Broken" languagecode="1033" />
                      </labels>
                    </option>
                    <option value="3" />
                  </optionset>
                </attribute>
                <attribute PhysicalName="in_Country">
                  <Type>picklist</Type>
                </attribute>
                <attribute PhysicalName="Revenue">
                  <Type>money</Type>
                  <Precision>2</Precision>
                  <displaynames>
                    <displayname description="Annual Revenue" languagecode="1033" />
                  </displaynames>
                </attribute>
                <attribute PhysicalName="NumberOfEmployees">
                  <Type>int</Type>
                  <MinValue>0</MinValue>
                  <MaxValue>1000000</MaxValue>
                </attribute>
                <attribute PhysicalName="PrimaryContactId">
                  <Type>lookup</Type>
                  <LookupTypes>
                    <LookupType id="contact" />
                  </LookupTypes>
                </attribute>
                <attribute PhysicalName="OwnerId">
                  <Type>owner</Type>
                  <RequiredLevel>SystemRequired</RequiredLevel>
                  <LookupTypes>
                    <LookupType id="systemuser" />
                    <LookupType>team</LookupType>
                  </LookupTypes>
                </attribute>
                <attribute PhysicalName="HiddenCode" ValidForReadApi="0">
                  <Type>nvarchar</Type>
                  <RequiredLevel>required</RequiredLevel>
                </attribute>
                <attribute PhysicalName="InternalNotes">
                  <Type>ntext</Type>
                  <IsRetrievable>false</IsRetrievable>
                </attribute>
                <attribute PhysicalName="EntityImage_URL">
                  <Type>virtual</Type>
                </attribute>
                <attribute PhysicalName="StrangeField">
                  <Type>weirdtype</Type>
                  <MaxLength>not-a-number</MaxLength>
                </attribute>
                <attribute>
                  <Type>nvarchar</Type>
                </attribute>
              </attributes>
            </entity>
          </EntityInfo>
        </Entity>
        <Entity>
          <EntityInfo />
        </Entity>
      </Entities>
    </ImportExportXml>
    """
)


@pytest.fixture
def write_customizations(tmp_path: Path):
    """Factory that writes XML content to a file in tmp_path and returns its path."""

    def _write(content: str = SAMPLE_CUSTOMIZATIONS, name: str = "customizations.xml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def customizations_file(write_customizations) -> Path:
    return write_customizations()


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "schemas"


@pytest.fixture
def options(customizations_file: Path, output_dir: Path) -> GeneratorOptions:
    return GeneratorOptions(
        input_path=str(customizations_file),
        output_path=str(output_dir),
        base_id=BASE_ID,
    )


@pytest.fixture
def account_entity() -> Entity:
    """The account entity used by the builder scenarios."""
    return Entity(
        name="account",
        logical_name="account",
        attributes=(
            Attribute(
                logical_name="accountid",
                physical_name="accountid",
                attribute_type=AttributeType.UNIQUEIDENTIFIER,
                required_level=RequiredLevel.SYSTEM_REQUIRED,
            ),
            Attribute(
                logical_name="industrycode",
                physical_name="industrycode",
                attribute_type=AttributeType.PICKLIST,
                option_values=(
                    OptionValue(value=1, label="Accounting"),
                    OptionValue(value=2, label="Agriculture"),
                ),
            ),
            Attribute(
                logical_name="name",
                physical_name="name",
                attribute_type=AttributeType.NVARCHAR,
                max_length=160,
                required_level=RequiredLevel.REQUIRED,
            ),
        ),
    )


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch, tmp_path: Path):
    """Isolate tests from DATAVERSE_SCHEMA_* variables and any .env in the working directory."""
    for name in list(os.environ):
        if name.upper().startswith("DATAVERSE_SCHEMA_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()
