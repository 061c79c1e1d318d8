import pytest

# One record as printed by the kernel, without the trailing blank line.
RECORD_TEMPLATE = """processor\t: {processor}
vendor_id\t: GenuineIntel
cpu family\t: 6
model\t\t: 142
model name\t: Intel(R) Core(TM) i7-8565U CPU @ 1.80GHz
stepping\t: 11
microcode\t: 0xf0
cpu MHz\t\t: 2000.000
cache size\t: 8192 KB
physical id\t: 0
siblings\t: 8
core id\t\t: {core_id}
cpu cores\t: 4
apicid\t\t: {apicid}
initial apicid\t: {apicid}
fpu\t\t: yes
fpu_exception\t: yes
cpuid level\t: 22
wp\t\t: yes
flags\t\t: fpu vme de pse tsc msr pae mce cx8 apic sep mtrr pge mca cmov sse sse2 ht vmx avx2
vmx flags\t: vnmi preemption_timer invvpid ept_x_only ept_ad
bugs\t\t: spectre_v1 spectre_v2 spec_store_bypass swapgs
bogomips\t: 3999.93
clflush size\t: 64
cache_alignment\t: 64
address sizes\t: 39 bits physical, 48 bits virtual
power management:
"""


def make_record(processor: int = 0, core_id: int = 0, apicid: int = 0) -> str:
    """Render one processor record."""
    return RECORD_TEMPLATE.format(processor=processor, core_id=core_id, apicid=apicid)


def make_listing(count: int) -> str:
    """Render ``count`` records separated by single blank lines."""
    return "\n".join(
        make_record(processor=i, core_id=i % 4, apicid=i) for i in range(count)
    )


@pytest.fixture
def record_text():
    """A single valid processor record."""
    return make_record()


@pytest.fixture
def listing_text():
    """A valid listing with four processors."""
    return make_listing(4)


@pytest.fixture
def listing_file(tmp_path, listing_text):
    """A listing written to disk with the kernel's trailing blank line."""
    path = tmp_path / "cpuinfo"
    path.write_text(listing_text + "\n", encoding="utf-8")
    return path
