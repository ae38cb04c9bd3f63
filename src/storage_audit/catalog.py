"""Known storage locations and cleanup commands for storage-audit."""

from storage_audit.models import CatalogEntry, CatalogSection, CleanupTip, SafetyTier

SAFE = SafetyTier.SAFE
CAUTION = SafetyTier.CAUTION
REVIEW = SafetyTier.REVIEW

# Ordered by section, then by entry. Report output follows this order exactly.
CATALOG: list[CatalogSection] = [
    # =============================================================================
    # DOCKER
    # =============================================================================
    CatalogSection(
        name="DOCKER",
        icon="🐳",
        entries=[
            CatalogEntry(
                label="Docker disk image (all data)",
                path="~/Library/Containers/com.docker.docker/Data",
                tier=REVIEW,
                advisory="Contains all images, containers, volumes. Use 'docker system prune -a' to clean",
            ),
            CatalogEntry(
                label="Docker Desktop VM",
                path="~/Library/Containers/com.docker.docker/Data/vms",
                tier=REVIEW,
                advisory="VM disk grows over time. 'docker system df' shows breakdown",
            ),
        ],
    ),
    # =============================================================================
    # PACKAGE MANAGERS & LANGUAGE CACHES
    # =============================================================================
    CatalogSection(
        name="PACKAGE MANAGERS & LANGUAGE CACHES",
        icon="📦",
        entries=[
            CatalogEntry(
                label="Homebrew cache",
                path="~/Library/Caches/Homebrew",
                tier=SAFE,
                advisory="Old downloads. Clean: brew cleanup --prune=all",
            ),
            CatalogEntry(
                label="Homebrew cellar",
                path="/usr/local/Cellar",
                tier=REVIEW,
                advisory="Installed packages. Check for unused: brew autoremove",
            ),
            CatalogEntry(
                label="Homebrew cellar (ARM)",
                path="/opt/homebrew/Cellar",
                tier=REVIEW,
                advisory="Installed packages (Apple Silicon). Check: brew autoremove",
            ),
            CatalogEntry(
                label="npm cache",
                path="~/.npm",
                tier=SAFE,
                advisory="Clean: npm cache clean --force",
            ),
            CatalogEntry(
                label="Yarn cache",
                path="~/Library/Caches/Yarn",
                tier=SAFE,
                advisory="Clean: yarn cache clean",
            ),
            CatalogEntry(
                label="Yarn cache (v2)",
                path="~/.yarn/cache",
                tier=SAFE,
                advisory="Clean: yarn cache clean",
            ),
            CatalogEntry(
                label="pnpm store",
                path="~/Library/pnpm/store",
                tier=SAFE,
                advisory="Clean: pnpm store prune",
            ),
            CatalogEntry(
                label="pip cache",
                path="~/Library/Caches/pip",
                tier=SAFE,
                advisory="Clean: pip cache purge",
            ),
            CatalogEntry(
                label="pip cache (alt)",
                path="~/.cache/pip",
                tier=SAFE,
                advisory="Clean: pip cache purge",
            ),
            CatalogEntry(
                label="Maven local repo (.m2)",
                path="~/.m2/repository",
                tier=CAUTION,
                advisory="Java deps. Safe to delete but will re-download on next build",
            ),
            CatalogEntry(
                label="Gradle caches",
                path="~/.gradle/caches",
                tier=SAFE,
                advisory="Build caches. Clean: gradle --stop && rm -rf ~/.gradle/caches",
            ),
            CatalogEntry(
                label="Gradle wrapper dists",
                path="~/.gradle/wrapper/dists",
                tier=SAFE,
                advisory="Downloaded Gradle versions",
            ),
            CatalogEntry(
                label="Go module cache",
                path="~/go/pkg/mod",
                tier=SAFE,
                advisory="Clean: go clean -modcache",
            ),
            CatalogEntry(
                label="Go build cache",
                path="~/Library/Caches/go-build",
                tier=SAFE,
                advisory="Clean: go clean -cache",
            ),
            CatalogEntry(
                label="Cargo registry (Rust)",
                path="~/.cargo/registry",
                tier=SAFE,
                advisory="Rust crate cache. Clean: cargo cache -a (needs cargo-cache)",
            ),
            CatalogEntry(
                label="Cargo build cache",
                path="~/.cargo/git",
                tier=SAFE,
                advisory="Git checkouts for crates",
            ),
            CatalogEntry(
                label="CocoaPods cache",
                path="~/Library/Caches/CocoaPods",
                tier=SAFE,
                advisory="Clean: pod cache clean --all",
            ),
            CatalogEntry(
                label="Pub cache (Dart/Flutter)",
                path="~/.pub-cache",
                tier=SAFE,
                advisory="Dart packages",
            ),
        ],
    ),
    # =============================================================================
    # IDE & DEVELOPER TOOLS
    # =============================================================================
    CatalogSection(
        name="IDE & DEVELOPER TOOLS",
        icon="🛠️ ",
        entries=[
            CatalogEntry(
                label="Xcode DerivedData",
                path="~/Library/Developer/Xcode/DerivedData",
                tier=SAFE,
                advisory="Build artifacts. Rebuilds automatically. Safe to delete entirely",
            ),
            CatalogEntry(
                label="Xcode Archives",
                path="~/Library/Developer/Xcode/Archives",
                tier=CAUTION,
                advisory="Old app builds. Review before deleting",
            ),
            CatalogEntry(
                label="Xcode device support",
                path="~/Library/Developer/Xcode/iOS DeviceSupport",
                tier=SAFE,
                advisory="Symbols for old iOS versions. Delete old ones",
            ),
            CatalogEntry(
                label="Xcode watchOS device support",
                path="~/Library/Developer/Xcode/watchOS DeviceSupport",
                tier=SAFE,
                advisory="watchOS debug symbols",
            ),
            CatalogEntry(
                label="CoreSimulator devices",
                path="~/Library/Developer/CoreSimulator/Devices",
                tier=SAFE,
                advisory="iOS simulators. Clean: xcrun simctl delete unavailable",
            ),
            CatalogEntry(
                label="CoreSimulator caches",
                path="~/Library/Developer/CoreSimulator/Caches",
                tier=SAFE,
                advisory="Simulator caches",
            ),
            CatalogEntry(
                label="Android SDK",
                path="~/Library/Android/sdk",
                tier=REVIEW,
                advisory="Check for old platform versions & system images",
            ),
            CatalogEntry(
                label="Android AVD (emulators)",
                path="~/.android/avd",
                tier=REVIEW,
                advisory="Virtual device images. Delete unused emulators",
            ),
            CatalogEntry(
                label="IntelliJ / IDEA caches",
                path="~/Library/Caches/JetBrains",
                tier=SAFE,
                advisory="IDE caches, will regenerate",
            ),
            CatalogEntry(
                label="IntelliJ / IDEA logs",
                path="~/Library/Logs/JetBrains",
                tier=SAFE,
                advisory="IDE log files",
            ),
            CatalogEntry(
                label="VS Code extensions",
                path="~/.vscode/extensions",
                tier=REVIEW,
                advisory="Check for unused extensions",
            ),
            CatalogEntry(
                label="VS Code cache",
                path="~/Library/Application Support/Code/Cache",
                tier=SAFE,
                advisory="VS Code cache data",
            ),
            CatalogEntry(
                label="VS Code CachedData",
                path="~/Library/Application Support/Code/CachedData",
                tier=SAFE,
                advisory="VS Code cached data",
            ),
        ],
    ),
    # =============================================================================
    # CLOUD & VIRTUAL MACHINES
    # =============================================================================
    CatalogSection(
        name="CLOUD & VIRTUAL MACHINES",
        icon="☁️ ",
        entries=[
            CatalogEntry(
                label="Google Cloud SDK",
                path="~/.config/gcloud",
                tier=REVIEW,
                advisory="GCP config & cached credentials",
            ),
            CatalogEntry(
                label="Firebase emulator cache",
                path="~/.cache/firebase",
                tier=SAFE,
                advisory="Downloaded emulator JARs",
            ),
            CatalogEntry(
                label="Terraform plugin cache",
                path="~/.terraform.d/plugin-cache",
                tier=SAFE,
                advisory="Cached provider plugins",
            ),
            CatalogEntry(
                label="Minikube",
                path="~/.minikube",
                tier=REVIEW,
                advisory="Local K8s cluster data. Delete if not using",
            ),
            CatalogEntry(
                label="Vagrant boxes",
                path="~/.vagrant.d/boxes",
                tier=REVIEW,
                advisory="VM images. Delete unused boxes",
            ),
        ],
    ),
    # =============================================================================
    # SYSTEM & APPLICATION CACHES
    # =============================================================================
    CatalogSection(
        name="SYSTEM & APPLICATION CACHES",
        icon="🗂️ ",
        entries=[
            CatalogEntry(
                label="User cache directory",
                path="~/Library/Caches",
                tier=CAUTION,
                advisory="Total app caches. Individual apps can be cleaned selectively",
            ),
            CatalogEntry(
                label="User logs",
                path="~/Library/Logs",
                tier=SAFE,
                advisory="Application log files",
            ),
            CatalogEntry(
                label="Spotlight index",
                path="/System/Volumes/Data/.Spotlight-V100",
                tier=REVIEW,
                advisory="Rebuilt automatically. sudo mdutil -E / to reindex",
            ),
            CatalogEntry(
                label="Time Machine local snapshots",
                path="/Volumes/com.apple.TimeMachine.localsnapshots",
                tier=REVIEW,
                advisory="List: tmutil listlocalsnapshots / | Delete old ones",
            ),
            CatalogEntry(
                label="macOS software updates",
                path="/Library/Updates",
                tier=SAFE,
                advisory="Pending/completed update files",
            ),
            CatalogEntry(
                label="System logs",
                path="/private/var/log",
                tier=CAUTION,
                advisory="System logs. sudo log erase --all (nuclear option)",
            ),
            CatalogEntry(
                label="Sleepimage",
                path="/private/var/vm/sleepimage",
                tier=REVIEW,
                advisory="Hibernate file, equals RAM size. Recreated on sleep",
            ),
            CatalogEntry(
                label="Swap files",
                path="/private/var/vm",
                tier=REVIEW,
                advisory="VM swap files, managed by macOS",
            ),
        ],
    ),
    # =============================================================================
    # TRASH & MISC
    # =============================================================================
    CatalogSection(
        name="TRASH & MISC",
        icon="🗑️ ",
        entries=[
            CatalogEntry(
                label="User Trash",
                path="~/.Trash",
                tier=SAFE,
                advisory="Empty Trash from Finder",
            ),
            CatalogEntry(
                label="Node modules (home dir only)",
                path="~/node_modules",
                tier=SAFE,
                advisory="Accidental global node_modules in home dir",
            ),
        ],
    ),
]


# Copy-and-paste commands printed after the summary
CLEANUP_TIPS: list[CleanupTip] = [
    CleanupTip(
        comment="Docker cleanup (can reclaim tens of GBs)",
        commands=["docker system prune -a --volumes"],
    ),
    CleanupTip(
        comment="Homebrew cleanup",
        commands=["brew cleanup --prune=all && brew autoremove"],
    ),
    CleanupTip(
        comment="npm/Yarn/pnpm cache",
        commands=["npm cache clean --force", "yarn cache clean", "pnpm store prune"],
    ),
    CleanupTip(
        comment="Java build caches",
        commands=[
            "rm -rf ~/.gradle/caches ~/.gradle/wrapper/dists",
            "# rm -rf ~/.m2/repository  # (will re-download deps)",
        ],
    ),
    CleanupTip(comment="Go caches", commands=["go clean -cache -modcache"]),
    CleanupTip(
        comment="Xcode cleanup",
        commands=["rm -rf ~/Library/Developer/Xcode/DerivedData", "xcrun simctl delete unavailable"],
    ),
    CleanupTip(
        comment="iOS/watchOS device support (old versions)",
        commands=["# Review: ls ~/Library/Developer/Xcode/iOS\\ DeviceSupport/"],
    ),
    CleanupTip(
        comment="JetBrains IDE caches",
        commands=["rm -rf ~/Library/Caches/JetBrains ~/Library/Logs/JetBrains"],
    ),
    CleanupTip(comment="Interactive node_modules cleanup", commands=["npx npkill"]),
    CleanupTip(comment="Empty Trash", commands=["rm -rf ~/.Trash/*"]),
    CleanupTip(comment="Firebase emulator cache", commands=["rm -rf ~/.cache/firebase"]),
]


def get_all_entries() -> list[CatalogEntry]:
    """Get every catalog entry in report order."""
    return [entry for section in CATALOG for entry in section.entries]


def get_section(name: str) -> CatalogSection | None:
    """Get a catalog section by name (case-insensitive)."""
    wanted = name.casefold()
    for section in CATALOG:
        if section.name.casefold() == wanted:
            return section
    return None


def get_entries_by_tier(tier: SafetyTier) -> list[CatalogEntry]:
    """Get catalog entries with the given safety tier."""
    return [entry for entry in get_all_entries() if entry.tier == tier]
