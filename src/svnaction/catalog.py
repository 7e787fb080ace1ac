"""Fixed catalog of event actions: single source of truth for all action ids.

Every constant below is created through the default registry inside one
``bulk()`` block, so the whole table is installed atomically at import time
and every constant is also reachable via ``get_action_by_id``.  The numeric
ids and names are a wire contract: never renumber or rename an entry.
"""

from __future__ import annotations

from svnaction.models import EventAction
from svnaction.registry import get_registry

with get_registry().bulk() as create:
    # Reserved
    PROGRESS = create(-1, "progress")
    # Working copy scheduling
    ADD = create(0, "add")
    COPY = create(1, "copy")
    DELETE = create(2, "delete")
    RESTORE = create(3, "restore")
    REVERT = create(4, "revert")
    FAILED_REVERT = create(5, "failed_revert")
    RESOLVED = create(6, "resolved")
    SKIP = create(7, "skip")
    # Update
    UPDATE_DELETE = create(8, "update_delete")
    UPDATE_ADD = create(9, "update_add")
    UPDATE_UPDATE = create(10, "update_update")
    UPDATE_NONE = create(-10, "update_none")
    UPDATE_COMPLETED = create(11, "update_completed")
    UPDATE_EXTERNAL = create(12, "update_external")
    # Status
    STATUS_COMPLETED = create(13, "status_completed")
    STATUS_EXTERNAL = create(14, "status_external")
    # Commit
    COMMIT_MODIFIED = create(15, "commit_modified")
    COMMIT_ADDED = create(16, "commit_added")
    COMMIT_DELETED = create(17, "commit_deleted")
    COMMIT_REPLACED = create(18, "commit_replaced")
    COMMIT_DELTA_SENT = create(19, "commit_delta_sent")
    COMMIT_COMPLETED = create(-3, "commit_completed")
    # Annotate
    ANNOTATE = create(20, "annotate")
    # Locking
    LOCKED = create(21, "locked")
    UNLOCKED = create(22, "unlocked")
    LOCK_FAILED = create(23, "lock_failed")
    UNLOCK_FAILED = create(24, "unlock_failed")
    # Working copy upgrade
    UPGRADE = create(-2, "wc_upgrade")
    UPGRADED_PATH = create(50, "upgraded_path")
    URL_REDIRECT = create(59, "url_redirect")
    UPDATE_EXISTS = create(25, "update_exists")
    # Changelists
    CHANGELIST_SET = create(26, "changelist_set")
    CHANGELIST_CLEAR = create(27, "changelist_clear")
    CHANGELIST_MOVED = create(28, "changelist_moved")
    # Merge
    MERGE_BEGIN = create(29, "merge_begin")
    FOREIGN_MERGE_BEGIN = create(30, "foreign_merge_begin")
    UPDATE_REPLACE = create(31, "update_replace")
    # Properties
    PROPERTY_ADD = create(32, "property_added")
    PROPERTY_MODIFY = create(33, "property_modified")
    PROPERTY_DELETE = create(34, "property_deleted")
    PROPERTY_DELETE_NONEXISTENT = create(35, "property_deleted_nonexistent")
    REVPROP_SET = create(36, "revprop_set")
    REVPROP_DELETE = create(37, "revprop_deleted")
    MERGE_COMPLETED = create(38, "merge_completed")
    TREE_CONFLICT = create(39, "tree_conflict")
    FAILED_EXTERNAL = create(40, "failed_external")
    # Patch
    PATCH = create(53, "patch")
    UPDATE_STARTED = create(41, "update_started")
    PATCH_REJECTED_HUNK = create(55, "patch_rejected_hunk")
    PATCH_APPLIED_HUNK = create(54, "patch_applied_hunk")
    PATCH_HUNK_ALREADY_APPLIED = create(56, "patch_hunk_already_applied")
    # Update skips and shadowed changes
    UPDATE_SKIP_OBSTRUCTION = create(42, "update_skip_obstruction")
    UPDATE_SKIP_WORKING_ONLY = create(43, "update_skip_working_only")
    UPDATE_SKIP_ACCESS_DENIED = create(44, "update_skip_access_denied")
    UPDATE_EXTERNAL_REMOVED = create(45, "update_external_removed")
    UPDATE_SHADOWED_ADD = create(46, "update_shadowed_add")
    UPDATE_SHADOWED_UPDATE = create(47, "update_shadowed_update")
    UPDATE_SHADOWED_DELETE = create(48, "update_shadowed_delete")
    SKIP_CONFLICTED = create(68, "skip_conflicted")
    PATH_NONEXISTENT = create(60, "path_nonexistent")
    # Mergeinfo recording
    MERGE_RECORD_INFO = create(49, "merge_record_info")
    MERGE_RECORD_INFO_BEGIN = create(51, "merge_record_info_begin")
    MERGE_ELIDE_INFO = create(52, "merge_elide_info")
    # Failures
    FAILED_OUT_OF_DATE = create(64, "failed_out_of_date")
    FAILED_NO_PARENT = create(65, "failed_no_parent")
    FAILED_LOCKED = create(66, "failed_locked")
    FAILED_FORBIDDEN_BY_SERVER = create(67, "failed_forbidden_by_server")
    UPDATE_BROKEN_LOCK = create(69, "update_broken_lock")
    # Conflict resolver
    RESOLVER_STARTING = create(71, "resolver_starting")
    RESOLVER_DONE = create(72, "resolver_done")
    FAILED_OBSTRUCTION = create(70, "failed_obstruction")
    FAILED_CONFLICT = create(62, "failed_conflict")
    FAILED_MISSING = create(63, "failed_missing")
    # Moves and externals
    FOREIGN_COPY_BEGIN = create(74, "foreign_copy_begin")
    MOVE_BROKEN = create(75, "move_broken")
    CLEANUP_EXTERNAL = create(76, "cleanup_external")
    FAILED_REQUIRES_TARGET = create(77, "failed_requires_target")
    INFO_EXTERNAL = create(78, "info_external")
    COMMIT_FINALIZING = create(79, "commit_finalizing")

del create

# Legacy spellings
REVPROPER_SET = REVPROP_SET
MERGE_COMPLETE = MERGE_COMPLETED
UPDATE_SKIP_ACCESS_DENINED = UPDATE_SKIP_ACCESS_DENIED

ALL_ACTIONS: tuple[EventAction, ...] = tuple(dict.fromkeys(
    value for value in list(globals().values()) if isinstance(value, EventAction)
))

__all__ = [name for name, value in list(globals().items()) if isinstance(value, EventAction)]
__all__.append("ALL_ACTIONS")
