"""Runtime layer: REST transport and result cache paging."""
