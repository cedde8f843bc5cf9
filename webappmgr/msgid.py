"""Message identifiers attached to log records."""

from __future__ import annotations

from enum import Enum


class MsgId(str, Enum):
    """Identifier strings used to tag log messages."""

    # App launch timing
    APPLAUNCH_START = "APPLAUNCH_START"
    APP_LOADED = "APPLOADED"

    WINDOW_CLOSED = "WINDOW_CLOSED"
    WINDOW_CLOSED_JS = "WINDOW_CLOSED_JS"
    WINDOW_FOCUSIN = "WINDOW_FOCUSIN"
    WINDOW_FOCUSOUT = "WINDOW_FOCUSOUT"
    WINDOW_STATECHANGE = "WINDOW_STATECHANGE"
    PAGE_CLOSED = "PAGE_CLOSED"
    PAGE_LOAD_FAILED = "PAGE_LOAD_FAILED"

    WINDOW_EVENT = "WINDOW_EVENT"
    WINDOW_STATE_CHANGED = "WINDOW_STATE_CHANGED"
    RESUME_ALL = "RESUME_ALL"
    SUSPEND_WEBPAGE_DELAYED = "SUSPEND_WEBPAGE_DELAYED"
    SUSPEND_WEBPAGE = "SUSPEND_WEBPAGE"
    SUSPEND_PAINTING_VISIBILITY_HIDDEN = "SUSPEND_PAINTING_VISIBILITY_HIDDEN"
    RESUME_WEBPAGE = "RESUME_WEBPAGE"
    SUSPEND_MEDIA = "SUSPEND_MEDIA"
    RESUME_MEDIA = "RESUME_MEDIA"
    KEY_EVENT = "KEY_EVENT"
    MOUSE_BUTTON_EVENT = "MOUSE_BUTTON_EVENT"
    MOUSE_MOVE_EVENT = "MOUSE_MOVE_EVENT"
    POST_BUNDLE_MSG = "POST_BUNDLE_MSG"
    HANDLE_BUNDLE_MSG = "HANDLE_BUNDLE_MSG"
    KILL_APP = "KILL_APP"
    PAUSE_APP = "PAUSE_APP"
    FORCE_CLOSE_KEEP_ALIVE_APP = "FORCE_CLOSE_KEEP_ALIVE_APP"
    WEBPROC_CRASH = "WEBPROC_CRASH"
    BACKKEY_HANDLE = "BACKKEY_HANDLE"
    PAGE_LOADING = "PAGE_LOADING"
    LOAD = "LOAD"
    PALMSYSTEM = "PALMSYSTEM"
    POST_RUNNING_APPS = "MSGID_POST_RUNNING_APPS"
    WAM_DEBUG = "GENERAL"
    LUNA_API = "LUNA_API"
    DEEPLINKING = "DEEPLINKING"
    VKB_EVENT = "VKB_EVENT"

    APP_DESC_PARSE_FAIL = "APP_DESC_PARSE_FAIL"
    APP_DESC_PARSE_OBJ = "APP_DESC_PARSE_OBJ"
    REG_LS2_FAIL = "REG_LS2_FAIL"
    REG_LS2_CAT_FAIL = "REG_LS2_CAT_FAIL"
    REG_LS2_ATTACH_FAIL = "REG_LS2_ATTACH_FAIL"
    UNREG_LS2_FAIL = "UNREG_LS2_FAIL"
    LS2_CALL_FAIL = "LS2_CALL_FAIL"
    LS2_CANCEL_NOT_ACTIVE = "LS2_CANCEL_NOT_ACTIVE"
    LS2_CANCEL_FAIL = "LS2_CANCEL_FAIL"
    PLUGIN_LOAD_FAIL = "PLUGIN_LOAD_FAIL"
    BUNDLE_LOAD_FAIL = "BUNDLE_LOAD_FAIL"
    LAUNCH_URL_BAD_APP_DESC = "LAUNCH_URL_BAD_APP_DESC"
    LOW_MEM_LAUNCH_FAIL = "LOW_MEM_LAUNCH_FAIL"
    LOW_MEM_NEW_PAGE_FAIL = "LOW_MEM_NEW_PAGE_FAIL"
    MEM_MGR_API_CALL_FAIL = "MEM_MGR_API_CALL_FAIL"
    SIGNAL_REGISTRATION_FAIL = "SINGAL_REGISTRATION_FAIL"
    APP_MGR_API_CALL_FAIL = "APP_MGR_API_CALL_FAIL"
    MEMWATCH_APP_CLOSE = "MEMWATCH_APP_CLOSE"
    PREPARE_FAIL = "PREPARE_FAIL"
    TAKE_FAIL = "TAKE_FAIL"
    BAD_WINDOW_TYPE = "BAD_WINDOW_TYPE"
    SETTING_SERVICE = "SETTING_SERVICE"
    RECEIVED_INVALID_SETTINGS = "RECEIVED_INVALID_SETTINGS"
    APP_LAUNCH = "APP_LAUNCH"
    APP_RELAUNCH = "APP_RELAUNCH"
    SERVICE_CONNECT_FAIL = "SERVICE_CONNECT_FAIL"
    DISPLAY_CONNECT_FAIL = "DISPLAY_CONNECT_FAIL"
    MEMORY_CONNECT_FAIL = "MEMORY_CONNECT_FAIL"
    APPMANAGER_CONNECT_FAIL = "APPMANAGER_CONNECT_FAIL"
    BOOTD_CONNECT_FAIL = "BOOTD_CONNECT_FAIL"
    SECURITYMANAGER_CONNECT_FAIL = "SECURITYMANAGER_CONNECT_FAIL"
    NETWORK_CONNECT_FAIL = "NETWORK_CONNECT_FAIL"
    INVALID_EVENT = "INVALID_EVENT"
    BOOTD_SUBSCRIBE_FAIL = "BOOTD_SUBSCRIBE_FAIL"
    ACTIVITY_MANAGER_CREATE_FAIL = "ACTIVITY_MANAGER_CREATE_FAIL"
    WAM_INVALID_USER_PERMISSION = "WAM_INVALID_USER_PERMISSION"

    KILL_WEBPROCESS_DELAYED = "KILL_WEBPROCESS_DELAYED"
    APPID_HAS_UPPERCASE = "APPID_HAS_UPPERCASE"

    ERROR_ERROR = "ERROR_PAGE_ERROR"
    CLOSE_CALL_FAIL = "CLOSE_CALL_FAIL"

    LOCALEINFO_READ_FAIL = "LOCALEINFO_FILE_READ_FAIL"

    # Multi web-process model
    SET_WEBPROCESS_ENVIRONMENT = "SET_WEBPROCESS_ENVIRONMENT"
    KILL_WEBPROCESS = "KILL_WEBPROCESS"
    KILL_WEBPROCESS_FAILED = "KILL_WEBPROCESS_FAILED"

    WEBPROCESSENV_READ_FAIL = "WEBPROCESSENV_FILE_READ_FAIL"
    WEBPROCESS_INFO_ADDED = "WEBPROCESS_INFO_ADDED"
    WEBPROCESS_PROXYID_SET = "WEBPROCESS_PROXYID_SET"
    WEBPAGE_ADDED = "WEBPAGE_ADDED"
    WEBPAGE_REMOVED = "WEBPAGE_REMOVED"

    EXECUTE_CLOSECALLBACK = "EXECUTE_CLOSECALLBACK"
    CLEANRESOURCE_COMPLETED = "CLEANRESOURCE_COMPLETED"
    START_LAUNCHURL = "START_LAUNCHURL"
    CLOSE_APP_INTERNAL = "CLOSE_APP_INTERNAL"
    WEBPAGE_LOAD = "WEBPAGE_LOAD"
    WEBPAGE_LOAD_FAILED = "WEBPAGE_LOAD_FAILED"
    WEBPAGE_CLOSED = "WEBPAGE_CLOSED"
    WEBAPP_CLOSED = "WEBAPP_CLOSED"
    WEBPAGE_RELAUNCH = "WEBPAGE_RELAUNCH"
    WEBAPP_STAGE_ACITVATED = "WEBAPP_STAGE_ACITVATED"
    WEBAPP_STAGE_DEACITVATED = "WEBAPP_STAGE_DEACITVATED"
    SETUP_LAUNCHEVENT = "SETUP_LAUNCHEVENT"
    SEND_RELAUNCHEVENT = "SEND_RELAUNCHEVENT"

    CREATE_SURFACEGROUP = "CREATE_SURFACEGROUP"
    DELETE_SURFACEGROUP = "DELETE_SURFACEGROUP"
    ATTACH_SURFACEGROUP = "ATTACH_SURFACEGROUP"
    DETACH_SURFACEGROUP = "DETACH_SURFACEGROUP"

    SERVICE_CALL = "SERVICE_CALL"
    SERVICE_CALL_FAIL = "SERVICE_CALL_FAIL"

    CONFIGD_CONNECT_FAIL = "CONFIGD_CONNECT_FAIL"

    NETWORKSTATUS_INFO = "NETWORKSTATUS_INFO"

    NOTIFY_MEMORY_STATE = "NOTIFY_MEMORY_STATE"

    TYPE_ERROR = "DATA_TYPE_ERROR"
    FILE_ERROR = "FILE_ERROR"

    DL_ERROR = "DL_ERROR"

    def __str__(self) -> str:
        return self.value