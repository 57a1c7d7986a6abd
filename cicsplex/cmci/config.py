"""Shared CMCI constants.

This module centralizes path segments, query term names, paging defaults and
well-known resource names so the URI builder and endpoint specs stay small.
"""

from __future__ import annotations

SEPARATOR = "/"

# Management root for every CMCI request
CICS_SYSTEM_MANAGEMENT = "CICSSystemManagement"

# Resource that serves windows of a cached result set
CICS_RESULT_CACHE = "CICSResultCache"

# Query terms, emitted in this order by the URI builder
CRITERIA = "CRITERIA"
PARAMETER = "PARAMETER"
SUMMONLY = "SUMMONLY"
NODISCARD = "NODISCARD"
OVERRIDE_WARNING_COUNT = "OVERRIDEWARNINGCOUNT"

# Records per CICSResultCache window
DEFAULT_INCREMENT = 800

# Marker the server puts in the message when a query matched too much
RESOURCE_LIMIT_MARKER = "exceeded a resource limit"

# CMCI api_response1 codes
RESPONSE_OK = 1024
RESPONSE_NODATA = 1027

# Well-known CMCI resource tables
CICS_CICSPLEX = "CICSCICSPlex"
CICS_REGION = "CICSRegion"
CICS_MANAGED_REGION = "CICSManagedRegion"
CICS_REGION_GROUP = "CICSRegionGroup"
CICS_LOCAL_FILE = "CICSLocalFile"
CICS_PROGRAM = "CICSProgram"
CICS_LIBRARY = "CICSLibrary"
CICS_LIBRARY_DATASET_NAME = "CICSLibraryDatasetName"
