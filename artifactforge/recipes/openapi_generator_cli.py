"""openapi-generator-cli: the jar plus a launcher that runs it on openjdk."""

from __future__ import annotations

from artifactforge.core.recipe import Recipe
from artifactforge.models.artifacts import ArtifactSource
from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._shell import shell
from artifactforge.recipes.openjdk import Openjdk


class OpenapiGeneratorCli(Recipe):
    name = "openapi-generator-cli"
    version = "7.18.0"
    platforms = DEFAULT_PLATFORMS
    dependencies = (Openjdk,)

    def sources(self, params: None) -> list[ArtifactSource]:
        return [
            ArtifactSource(
                name=self.name,
                path=(
                    "https://repo1.maven.org/maven2/org/openapitools/openapi-generator-cli/"
                    f"{self.version}/openapi-generator-cli-{self.version}.jar"
                ),
            )
        ]

    def environments(self, params: None, deps: dict[str, str]) -> list[str]:
        return [
            f"JAVA_HOME={deps['openjdk']}/Contents/Home",
            "PATH=$JAVA_HOME/bin:$PATH",
        ]

    def script(self, params: None, deps: dict[str, str]) -> str:
        openjdk = deps["openjdk"]
        launcher = "$BUILD_OUTPUT/bin/openapi-generator-cli"
        return shell(f"""
            mkdir -p "$BUILD_OUTPUT/bin"

            pushd ./source/{self.name}

            cp META-INF/MANIFEST.MF ../MANIFEST.MF

            jar cfm ../openapi-generator-cli.jar ../MANIFEST.MF .

            mv -v ../openapi-generator-cli.jar "$BUILD_OUTPUT/openapi-generator-cli.jar"

            cat << 'EOF' > "{launcher}"
            #!/bin/sh
            JAVA_HOME={openjdk}/Contents/Home
            PATH=$JAVA_HOME/bin:$PATH
            java -jar "$BUILD_OUTPUT/openapi-generator-cli.jar" "$@"
            EOF

            chmod +x "{launcher}"
        """)
