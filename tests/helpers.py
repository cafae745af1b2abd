"""Accounting line builders shared by the sge_acct tests."""

from sge_acct.schema import FIELD_NAMES

# One plausible accounting entry, keyed by schema name
SAMPLE_FIELDS = {
    "qname": "all.q",
    "hostname": "node01.cluster",
    "group": "staff",
    "owner": "alice",
    "job_name": "run_model.sh",
    "job_number": "1",
    "account": "sge",
    "priority": "0",
    "submission_time": "1700000000",
    "start_time": "1700000060",
    "end_time": "1700003660",
    "failed": "0",
    "exit_status": "0",
    "ru_wallclock": "3600",
    "ru_utime": "3500.25",
    "ru_stime": "90.5",
    "ru_maxrss": "204800",
    "ru_ixrss": "0",
    "ru_ismrss": "0",
    "ru_idrss": "0",
    "ru_isrss": "0",
    "ru_minflt": "51234",
    "ru_majflt": "12",
    "ru_nswap": "0",
    "ru_inblock": "1024",
    "ru_oublock": "2048",
    "ru_msgsnd": "0",
    "ru_msgrcv": "0",
    "ru_nsignals": "0",
    "ru_nvcsw": "4321",
    "ru_nivcsw": "987",
    "project": "NONE",
    "department": "defaultdepartment",
    "granted_pe": "NONE",
    "slots": "1",
    "task_number": "0",
    "cpu": "3590.750000",
    "mem": "12.250000",
    "io": "0.004000",
    "category": "-U staff -l h_rt=3600",
    "iow": "0.000000",
    "pe_taskid": "NONE",
    "maxvmem": "1073741824.000000",
    "arid": "0",
    "ar_submission_time": "0",
}


GE_PREAMBLE = [
    "# Version: 8.1.9",
    "# ",
    "# DO NOT MODIFY THIS FILE MANUALLY!",
    "# ",
]


def make_fields(**overrides) -> list[str]:
    """Return the 45 raw columns of SAMPLE_FIELDS with overrides applied."""
    unknown = set(overrides) - set(SAMPLE_FIELDS)
    if unknown:
        raise KeyError(f"unknown accounting fields: {sorted(unknown)}")
    values = {**SAMPLE_FIELDS, **overrides}
    return [str(values[name]) for name in FIELD_NAMES]


def make_line(**overrides) -> str:
    """Return one colon-joined accounting line."""
    return ":".join(make_fields(**overrides))
