"""Policy Shrink command line tool."""
