"""Helper modules shared by the Todoist client and the ``tdcli`` command line."""
