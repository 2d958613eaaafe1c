from wordpass.middleware.rate_limit import RateLimitConfig, RateLimiter


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_burst_then_limited():
    clock = FakeClock()
    limiter = RateLimiter(RateLimitConfig(requests_per_minute=60, burst_size=3), clock=clock)

    assert [limiter.is_allowed("10.0.0.1") for _ in range(4)] == [True, True, True, False]


def test_tokens_refill_over_time():
    clock = FakeClock()
    limiter = RateLimiter(RateLimitConfig(requests_per_minute=60, burst_size=1), clock=clock)

    assert limiter.is_allowed("10.0.0.1")
    assert not limiter.is_allowed("10.0.0.1")

    clock.now += 1.0
    assert limiter.is_allowed("10.0.0.1")


def test_clients_have_separate_buckets():
    limiter = RateLimiter(RateLimitConfig(requests_per_minute=60, burst_size=1), clock=FakeClock())

    assert limiter.is_allowed("10.0.0.1")
    assert limiter.is_allowed("10.0.0.2")
    assert limiter.tracked_clients == 2


def test_tracked_clients_stay_bounded():
    clock = FakeClock()
    limiter = RateLimiter(RateLimitConfig(max_tracked_clients=100), clock=clock)

    for i in range(1000):
        clock.now += 0.01
        limiter.is_allowed(f"10.0.{i // 256}.{i % 256}")

    assert limiter.tracked_clients <= 100


def test_idle_clients_pruned_before_active_ones():
    clock = FakeClock()
    limiter = RateLimiter(
        RateLimitConfig(
            requests_per_minute=1, burst_size=2, max_tracked_clients=2, max_idle_seconds=60
        ),
        clock=clock,
    )
    limiter.is_allowed("idle")

    clock.now += 100
    limiter.is_allowed("active")
    limiter.is_allowed("active")

    clock.now += 1
    assert limiter.is_allowed("newcomer")
    assert limiter.tracked_clients == 2
    # The active client keeps its drained bucket
    assert not limiter.is_allowed("active")


def test_config_from_settings(settings_factory):
    config = RateLimitConfig.from_settings(
        settings_factory(RATE_LIMIT_PER_MINUTE=30, RATE_LIMIT_BURST=2)
    )

    assert config == RateLimitConfig(requests_per_minute=30, burst_size=2)
